import os
import math
import pygame
from config import CFG, BG, ICE, WHITE, BLACK, RED, GRAY, YELLOW, BRAND, BRAND_2, GOAL_POST_W
from core import clamp
from state import GameStatus

START_BTN = pygame.Rect(0, 0, 220, 54)
AGAIN_BTN = pygame.Rect(0, 0, 240, 54)
BLUE_LINE = (0, 92, 185)


def try_set_window_icon(base_dir):
    png_path = os.path.join(base_dir, "img", "icon.png")
    try:
        if os.path.isfile(png_path):
            pygame.display.set_icon(pygame.image.load(png_path))
    except Exception:
        pass


def alpha_fill(surf, color, alpha, rect=None):
    rect = rect or surf.get_rect()
    layer = pygame.Surface((rect.w, rect.h), pygame.SRCALPHA)
    layer.fill((*color, int(clamp(alpha, 0, 255))))
    surf.blit(layer, rect.topleft)


def draw_field(surf, cfg=CFG):
    surf.fill(ICE)
    w, h = cfg.width, cfg.height
    goal_line = h - cfg.goal_y_offset
    pygame.draw.line(surf, RED, (0, goal_line), (w, goal_line), 3)
    crease = pygame.Rect(0, 0, cfg.goal_w + 60, 120)
    crease.midbottom = (w // 2, goal_line + 60)
    pygame.draw.arc(surf, BLUE_LINE, crease, 0, math.pi, 3)
    pygame.draw.line(surf, BLUE_LINE, (0, h * 0.18), (w, h * 0.18), 6)


def draw_goal(surf, flash, cfg=CFG):
    r = pygame.Rect(0, 0, int(cfg.goal_w), int(cfg.goal_h))
    r.midtop = (cfg.width // 2, int(cfg.height - cfg.goal_y_offset))
    pygame.draw.rect(surf, WHITE, r)
    for x in range(r.left, r.right, 12):
        pygame.draw.line(surf, GRAY, (x, r.top), (x, r.bottom), 1)
    for y in range(r.top, r.bottom, 12):
        pygame.draw.line(surf, GRAY, (r.left, y), (r.right, y), 1)
    pygame.draw.rect(surf, RED, (r.left - GOAL_POST_W // 2, r.top, GOAL_POST_W, r.h))
    pygame.draw.rect(surf, RED, (r.right - GOAL_POST_W // 2, r.top, GOAL_POST_W, r.h))
    pygame.draw.line(surf, RED, (r.left, r.top), (r.right, r.top), GOAL_POST_W // 2)
    if flash > 0:
        alpha_fill(surf, RED, 160 * flash, r)


def draw_goalie(surf, goalie, cfg=CFG):
    lift = 8 * math.sin(clamp(goalie.catch_animation, 0.0, 1.0) * math.pi)
    body = pygame.Rect(0, 0, int(cfg.goalie_w), int(cfg.goalie_h))
    body.center = (int(goalie.x), int(goalie.y - lift))
    pygame.draw.rect(surf, BRAND_2, body, border_radius=18)
    pygame.draw.rect(surf, BLACK, body, 3, border_radius=18)
    mask = pygame.Rect(0, 0, 44, 44)
    mask.midtop = (body.centerx, body.top - 22)
    pygame.draw.ellipse(surf, WHITE, mask)
    pygame.draw.ellipse(surf, BLACK, mask, 2)
    glove = pygame.Rect(0, 0, int(cfg.catch_w), 18)
    glove.midtop = body.midtop
    pygame.draw.rect(surf, BRAND, glove, border_radius=9)
    if goalie.catch_flash > 0:
        pygame.draw.rect(surf, YELLOW, body.inflate(10, 10), 4, border_radius=22)


def draw_puck(surf, puck):
    w = max(2, int(puck.r * 2 * (1 + puck.squash)))
    h = max(2, int(puck.r * 2 * (1 - puck.squash)))
    r = pygame.Rect(0, 0, w, h)
    r.center = (int(puck.x), int(puck.y))
    pygame.draw.ellipse(surf, BLACK, r)


def draw_confetti(surf, particles):
    if not particles:
        return
    layer = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
    for p in particles:
        dx = math.cos(p.angle) * p.size
        dy = math.sin(p.angle) * p.size
        col = (*p.color, int(255 * p.opacity))
        pygame.draw.line(layer, col, (p.x - dx, p.y - dy), (p.x + dx, p.y + dy), max(1, int(p.size)))
    surf.blit(layer, (0, 0))


def draw_catch_text(surf, font, text, cfg=CFG):
    if text is None:
        return
    life = clamp(text.ttl / cfg.catch_text_duration, 0.0, 1.0)
    t = font.render(f"+{text.value}", True, BRAND)
    t.set_alpha(int(255 * life))
    rise = (1.0 - life) * 30
    surf.blit(t, t.get_rect(center=(int(text.x), int(text.y - rise))))


def draw_hud(surf, small, snap):
    lines = [f"SAVES {snap.score}", f"LIVES {snap.lives}", f"BEST {snap.best_score}"]
    x = 14
    for s in lines:
        t = small.render(s, True, BLACK)
        surf.blit(t, (x, 12))
        x += t.get_width() + 22


def draw_pause_icon(screen, rect, paused):
    alpha_fill(screen, BRAND_2, 150 if paused else 90, rect)
    pygame.draw.rect(screen, BRAND if paused else WHITE, rect, 2, border_radius=8)
    cx, cy = rect.center
    half = rect.h // 2 - 8
    if paused:
        # play triangle
        pygame.draw.polygon(screen, WHITE, [(cx - half + 2, cy - half), (cx - half + 2, cy + half), (cx + half, cy)])
        return
    for dx in (-5, 5):
        bar = pygame.Rect(0, 0, 6, 2 * half)
        bar.center = (cx + dx, cy)
        pygame.draw.rect(screen, WHITE, bar, border_radius=2)


def draw_leaderboard(screen, small, entries, top, cfg=CFG):
    if not entries:
        return
    cx = cfg.width // 2
    head = small.render("TOP SAVES", True, BRAND)
    screen.blit(head, head.get_rect(center=(cx, top)))
    row_h = small.get_linesize()
    for rank, e in enumerate(entries, 1):
        y = top + rank * row_h
        if y + row_h > cfg.height:
            break
        name = str(e.get("name", ""))[:14]
        left = small.render(f"{rank:>2}. {name}", True, WHITE)
        right = small.render(str(e.get("score", 0)), True, YELLOW if rank == 1 else WHITE)
        screen.blit(left, left.get_rect(midleft=(cx - 130, y)))
        screen.blit(right, right.get_rect(midright=(cx + 130, y)))


def draw_button(screen, font, rect, text):
    pygame.draw.rect(screen, BRAND, rect, border_radius=12)
    pygame.draw.rect(screen, WHITE, rect, 2, border_radius=12)
    surf = font.render(text, True, WHITE)
    screen.blit(surf, surf.get_rect(center=rect.center))


def draw_overlay(screen, big, small, title, subtitle, color, cfg=CFG):
    alpha_fill(screen, BG, 170)
    cx, cy = cfg.width // 2, cfg.height // 2
    t = big.render(title, True, color)
    screen.blit(t, t.get_rect(center=(cx, cy - 80)))
    if subtitle:
        s = small.render(subtitle, True, WHITE)
        screen.blit(s, s.get_rect(center=(cx, cy - 30)))


def draw_frame(screen, fonts, snap, outcome=None, paused_icon=None, cfg=CFG, leaderboard=()):
    """Draw one snapshot; returns the overlay button rect that is clickable, if any."""
    big, font, small = fonts
    draw_field(screen, cfg)
    draw_goal(screen, snap.goal_flash, cfg)
    for p in snap.pucks:
        draw_puck(screen, p)
    draw_goalie(screen, snap.goalie, cfg)
    if snap.status is not GameStatus.ENDED:
        draw_confetti(screen, snap.particles)
    draw_catch_text(screen, font, snap.catch_text, cfg)
    if snap.catch_flash > 0:
        alpha_fill(screen, WHITE, 70 * snap.catch_flash)
    draw_hud(screen, small, snap)
    if paused_icon is not None:
        draw_pause_icon(screen, paused_icon, snap.status is GameStatus.PAUSED)

    if snap.status is GameStatus.IDLE:
        draw_overlay(screen, big, small, "GOALIE RUSH", "Catch the pucks before they reach the net", WHITE, cfg)
        START_BTN.center = (cfg.width // 2, cfg.height // 2 + 40)
        draw_button(screen, font, START_BTN, "START")
        return START_BTN

    if snap.status is GameStatus.PAUSED:
        draw_overlay(screen, big, small, "PAUSED", "Press P to resume", WHITE, cfg)
        return None

    if snap.status is GameStatus.ENDED:
        if outcome is not None and outcome.is_new_record:
            draw_overlay(screen, big, small, "NEW RECORD!", f"Saves: {outcome.final_score}", YELLOW, cfg)
        else:
            draw_overlay(screen, big, small, "GAME OVER",
                         f"Saves: {snap.score}   Best: {snap.best_score}", WHITE, cfg)
        draw_confetti(screen, snap.particles)
        AGAIN_BTN.center = (cfg.width // 2, cfg.height // 2 + 40)
        draw_button(screen, font, AGAIN_BTN, "PLAY AGAIN")
        draw_leaderboard(screen, small, leaderboard, AGAIN_BTN.bottom + 24, cfg)
        return AGAIN_BTN

    return None
