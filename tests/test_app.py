import pygame
import pytest

from sharkmaze import app
from sharkmaze.app import Renderer, main, run
from sharkmaze.game import Direction, Game
from sharkmaze.mapfile import parse_map

LINES = ["11111\n", "1PCE1\n", "11111"]


def _game():
    return Game(parse_map(LINES))


def _pixel(surface, tile, x, y):
    half = tile // 2
    return tuple(surface.get_at((x * tile + half, y * tile + half)))[:3]


def test_window_size_covers_map():
    renderer = Renderer(_game(), 10)
    assert renderer.window_size() == (50, 30)


def test_tile_size_must_be_positive():
    with pytest.raises(ValueError):
        Renderer(_game(), 0)


def test_exit_color_changes_when_fish_eaten():
    game = _game()
    renderer = Renderer(game, 8)
    assert renderer.tile_color("E") == app.EXIT_CLOSED_COLOR
    game.move(Direction.RIGHT)
    assert renderer.tile_color("E") == app.EXIT_OPEN_COLOR


def test_tile_colors_are_distinct():
    renderer = Renderer(_game(), 8)
    colors = {renderer.tile_color(c) for c in "10CPE"}
    assert len(colors) == 5


def test_draw_paints_tiles():
    game = _game()
    renderer = Renderer(game, 20)
    surface = pygame.Surface(renderer.window_size())
    renderer.draw(surface)
    assert _pixel(surface, 20, 0, 0) == renderer.tile_color("1")
    assert _pixel(surface, 20, 2, 1) == renderer.tile_color("C")
    assert _pixel(surface, 20, 3, 1) == renderer.tile_color("E")


def test_draw_reflects_moves():
    game = _game()
    renderer = Renderer(game, 20)
    surface = pygame.Surface(renderer.window_size())
    game.move(Direction.RIGHT)
    renderer.draw(surface)
    assert _pixel(surface, 20, 1, 1) == app.WATER_COLOR
    assert _pixel(surface, 20, 3, 1) == app.EXIT_OPEN_COLOR


def test_main_rejects_wrong_argument_count(capsys):
    assert main([]) == 1
    assert app.ARGUMENT_ERROR in capsys.readouterr().err


def test_main_rejects_bad_extension(capsys):
    assert main(["map.txt"]) == 1
    assert "Bad extension => .ber" in capsys.readouterr().err


def test_main_rejects_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "none.ber")]) == 1
    assert "none.ber" in capsys.readouterr().err


def test_main_rejects_invalid_map(tmp_path, capsys):
    path = tmp_path / "bad.ber"
    path.write_text("11111\n1P0E1\n11111")
    assert main([str(path)]) == 1
    assert "Error: check Map content" in capsys.readouterr().err


def test_run_plays_until_won(monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    batches = [
        [
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_d),
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT),
        ]
    ]

    def fake_get(*args, **kwargs):
        return batches.pop(0) if batches else [pygame.event.Event(pygame.QUIT)]

    monkeypatch.setattr(pygame.event, "get", fake_get)
    game_map = parse_map(LINES)
    assert run(game_map, 8) == 2
    assert "2 moves" in capsys.readouterr().out
    assert game_map.find("P") == (3, 1)


def test_run_stops_on_quit(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setattr(
        pygame.event, "get", lambda *a, **k: [pygame.event.Event(pygame.QUIT)]
    )
    game_map = parse_map(LINES)
    assert run(game_map, 8) == 0
    assert game_map.find("P") == (1, 1)