import pygame
from typing import Dict, Tuple
import config
from atc.airport import Airport
from atc.math_utils import add, mul, vturn
from atc.models import Aircraft
from .colors import WHITE, GREY, AMBER, RED, CYAN, GREEN


def alert_level(ac: Aircraft) -> int:
    """
    Worst alert across the aircraft's live pair trackers.

    0: clear
    1: conflict (advisory)
    2: violation or collision
    """
    level = 0
    for conflict in ac.conflicts.values():
        has_conflict, has_violation = conflict.has_alerts()
        if has_violation or conflict.collided:
            return 2
        if has_conflict:
            level = 1
    return level


def world_to_screen(center: Tuple[int, int], pos_km: Tuple[float, float]) -> Tuple[int, int]:
    # +x to right, +y up -> screen y inverted
    cx, cy = center
    return (int(cx + pos_km[0] * config.PIXELS_PER_KM),
            int(cy - pos_km[1] * config.PIXELS_PER_KM))


def draw_runways(screen, font, airport: Airport, center):
    for rwy in airport.runways:
        a, b = rwy.ends
        p1 = world_to_screen(center, a.threshold_km)
        p2 = world_to_screen(center, b.threshold_km)
        pygame.draw.line(screen, GREY, p1, p2, 3)
        for end, p in ((a, p1), (b, p2)):
            label = font.render(end.name, True, GREY)
            screen.blit(label, (p[0] - 12, p[1] + 6))


def draw_aircraft(screen, font, ac: Aircraft, center):
    x, y = world_to_screen(center, ac.pos_km)
    level = alert_level(ac)
    size = 6

    if level == 2:
        color = RED
        pygame.draw.rect(screen, RED, pygame.Rect(x - size, y - size, size * 2, size * 2))
    elif level == 1:
        color = AMBER
        pygame.draw.circle(screen, AMBER, (x, y), size)
    else:
        color = GREEN if ac.precision_guided else WHITE
        pts = [(x, y - size), (x + size, y), (x, y + size), (x - size, y)]
        pygame.draw.polygon(screen, color, pts, 2)

    # track leader line (1 minute of flight)
    lead_km = ac.speed_kts * config.KTS_TO_KMPS * 60.0
    tip = add(ac.pos_km, mul(vturn(ac.ground_track), lead_km))
    pygame.draw.line(screen, color, (x, y), world_to_screen(center, tip), 1)

    # data block
    call = font.render(ac.callsign, True, color)
    screen.blit(call, (x + 10, y - 16))
    alt = font.render(f"{ac.alt_ft / 100:03.0f} {ac.speed_kts / 10:02.0f}", True, GREY)
    screen.blit(alt, (x + 10, y))


def draw_radar(screen, font, airport: Airport, traffic: Dict[str, Aircraft]):
    """Scope centred on the airport with rings at the bounding radius."""
    screen_w, screen_h = screen.get_size()
    center_x = int(screen_w * 0.35)
    center_y = screen_h // 2
    center = (center_x, center_y)

    screen.fill(config.BG_COLOR)

    # range rings every 5 km, plus the pairing radius
    for r_km in (5, 10, 15, 20):
        pygame.draw.circle(screen, (50, 50, 60), center, int(r_km * config.PIXELS_PER_KM), 1)
    pygame.draw.circle(screen, (30, 70, 80), center,
                       int(config.BOUNDING_RADIUS_KM * config.PIXELS_PER_KM), 1)

    draw_runways(screen, font, airport, center)

    for ac in traffic.values():
        draw_aircraft(screen, font, ac, center)

    label = font.render(airport.icao, True, CYAN)
    screen.blit(label, (center_x - 20, 10))
