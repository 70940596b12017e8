# render.py
from typing import Tuple

import pygame  # type: ignore

from .config import CELL_SIZE, HUD_HEIGHT
from .game import Phase, Snapshot


def window_size(grid_size: int) -> Tuple[int, int]:
    return grid_size * CELL_SIZE, grid_size * CELL_SIZE + HUD_HEIGHT

def board_rect(grid_size: int) -> pygame.Rect:
    return pygame.Rect(0, HUD_HEIGHT, grid_size * CELL_SIZE, grid_size * CELL_SIZE)

def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, gy * CELL_SIZE + HUD_HEIGHT, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect, border_radius=3)

def score_label(value: int, shown: bool) -> str:
    """'-' until there's something worth showing."""
    return str(value) if shown else "-"

def draw_hud(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot, theme: dict) -> None:
    started = snap.phase is not Phase.IDLE
    score = font.render(f"SCORE {score_label(snap.score, started)}", True, theme["head"])
    best = font.render(f"HIGH SCORE {score_label(snap.high_score, snap.high_score > 0)}", True, theme["accent"])
    screen.blit(score, (8, (HUD_HEIGHT - score.get_height()) // 2))
    screen.blit(best, best.get_rect(topright=(screen.get_width() - 8, (HUD_HEIGHT - best.get_height()) // 2)))

def draw_game(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot, theme: dict) -> None:
    screen.fill(theme["bg"])
    board = pygame.Rect(0, HUD_HEIGHT, screen.get_width(), screen.get_height() - HUD_HEIGHT)
    pygame.draw.rect(screen, theme["board"], board)
    draw_hud(screen, font, snap, theme)

    if snap.phase is Phase.IDLE:
        draw_overlay(screen, font, ["SNAKE GAME", "Use arrow keys or click to move", "Press SPACE or click to start"])
        return

    if snap.food is not None:
        draw_cell(screen, snap.food[0], snap.food[1], theme["food"])
    # body first so the head is drawn on top
    for x, y in reversed(snap.snake[1:]):
        draw_cell(screen, x, y, theme["body"])
    hx, hy = snap.snake[0]
    draw_cell(screen, hx, hy, theme["head"])

    if snap.phase is Phase.PAUSED:
        draw_overlay(screen, font, ["PAUSED"], alpha=100)
    elif snap.phase is Phase.OVER:
        draw_overlay(screen, font, ["GAME OVER!", f"Score: {snap.score}", "Press SPACE to play again"])

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, lines, alpha: int = 140) -> None:
    # Dim with translucent overlay
    overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, alpha))  # RGBA
    screen.blit(overlay, (0, 0))

    cx, cy = screen.get_width() // 2, screen.get_height() // 2
    top = cy - (len(lines) - 1) * 16
    for i, line in enumerate(lines):
        text = font.render(line, True, (240, 240, 250))
        screen.blit(text, text.get_rect(center=(cx, top + i * 32)))
