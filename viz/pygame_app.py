from .hud import draw_hud
from .radar_display import draw_radar

def render(screen, font, world, selected: str = None):
    draw_radar(screen, font, world.airport, world.ac)
    draw_hud(screen, font, world, selected=selected)
