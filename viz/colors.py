WHITE = (235, 235, 235)
GREY = (140, 140, 150)
CYAN = (90, 220, 230)
GREEN = (80, 220, 120)
AMBER = (255, 190, 40)
RED = (240, 60, 60)
