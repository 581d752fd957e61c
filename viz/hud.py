import pygame
import textwrap
from typing import List, Tuple
from .colors import WHITE, AMBER, RED, GREEN, GREY


def draw_hud(screen, font, world, selected: str = None):
    """Side HUD panel showing controls, live pair trackers and recent notices."""
    screen_w, screen_h = screen.get_size()
    panel_w = int(screen_w * 0.30)
    panel_x = screen_w - panel_w
    margin_x, margin_y = 12, 10
    line_spacing = 20

    # translucent panel
    hud_surface = pygame.Surface((panel_w, screen_h), pygame.SRCALPHA)
    hud_surface.fill((0, 0, 0, 180))
    y = margin_y

    score = world.score
    header_lines = [
        f"t = {world.time_s:6.1f}s{'  [PAUSED]' if world.paused else ''}",
        f"Selected: {selected or 'None'}",
        f"Hits: {score.hit}   Warnings: {score.warning}",
        "",
        "Controls:",
        "[1-5]    Load scenario",
        "[SPACE]  Pause / Resume",
        "[R]      Reload scenario",
        "[TAB]    Select aircraft",
        "",
        "Pairs:",
    ]

    for line in header_lines:
        surf = font.render(line, True, WHITE)
        hud_surface.blit(surf, (margin_x, y))
        y += line_spacing

    max_text_width = panel_w - 2 * margin_x
    wrap_chars = max_text_width // 9

    for conflict in world.registry.trackers():
        if y > screen_h // 2:
            break
        first, second = conflict.aircraft
        has_conflict, has_violation = conflict.has_alerts()

        if conflict.collided or has_violation:
            color = RED
        elif has_conflict:
            color = AMBER
        else:
            color = GREEN

        flags = []
        if conflict.collided:
            flags.append("COLLIDED")
        if conflict.conflicts.runway_collision:
            flags.append("RWY")
        if conflict.violations.proximity_violation:
            flags.append("VIOL")
        elif conflict.conflicts.proximity_conflict:
            flags.append("CONF")

        marker = ">" if selected in (first.callsign, second.callsign) else " "
        text = (
            f"{marker}{first.callsign}/{second.callsign} "
            f"{conflict.distance:5.2f} km {conflict.altitude:5.0f} ft "
            f"{' '.join(flags) or 'clear'}"
        )
        for wline in textwrap.wrap(text, width=wrap_chars):
            surf = font.render(wline, True, color)
            hud_surface.blit(surf, (margin_x, y))
            y += line_spacing

    draw_notices(hud_surface, font, world.notices, margin_x, screen_h // 2 + line_spacing,
                 wrap_chars, line_spacing)

    # border line separating radar and HUD
    pygame.draw.line(hud_surface, (120, 120, 120), (0, 0), (0, screen_h), 1)
    screen.blit(hud_surface, (panel_x, 0))


def draw_notices(surface, font, notices: List[Tuple[float, str, bool]],
                 x: int, y: int, wrap_chars: int, line_spacing: int):
    surf = font.render("Notices:", True, WHITE)
    surface.blit(surf, (x, y))
    y += line_spacing
    for t, message, warning in reversed(notices):
        color = RED if warning else GREY
        for wline in textwrap.wrap(f"{t:6.1f}s {message}", width=wrap_chars):
            surface.blit(font.render(wline, True, color), (x, y))
            y += line_spacing
