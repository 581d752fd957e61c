import pygame, sys, argparse
from sim.world import World
from sim.scenarios import SCENARIOS
import config
from atc.io import load_traffic_csv
from viz.pygame_app import render


def load_scenario(key: str):
    fn = SCENARIOS.get(key, SCENARIOS["1"])
    return fn()


def load_traffic(args):
    if args.input:
        try:
            return load_traffic_csv(args.input)
        except (OSError, RuntimeError, ValueError) as e:
            print("Failed to load CSV:", e)
    return load_scenario(args.scenario)


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--input", "-i",
        help="traffic CSV file to load",
        default=None,
    )
    parser.add_argument(
        "--scenario", "-s",
        help="scenario key (1-5) if no input CSV",
        default="1",
    )
    parser.add_argument(
        "--log",
        help="conflict log CSV path",
        default="logs/conflict_log.csv",
    )
    args = parser.parse_args()

    pygame.init()
    screen = pygame.display.set_mode((config.SCREEN_W, config.SCREEN_H))
    pygame.display.set_caption("ATC Conflict Monitor")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("consolas,menlo,monospace", 16)

    world = World(load_traffic(args), log_path=args.log)

    # UI state
    selected_idx = 0
    callsigns = list(world.ac.keys())
    selected = callsigns[selected_idx] if callsigns else None

    running = True
    while running:
        clock.tick(int(1.0 / config.DT))

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN:
                reload = None
                if e.key == pygame.K_ESCAPE:
                    running = False

                elif e.key == pygame.K_SPACE:
                    world.paused = not world.paused

                elif e.key == pygame.K_r:
                    reload = load_traffic(args)

                elif e.unicode in SCENARIOS:
                    reload = load_scenario(e.unicode)

                elif e.key == pygame.K_TAB:
                    callsigns = list(world.ac.keys())
                    if not callsigns:
                        selected = None
                    else:
                        selected_idx = (selected_idx + 1) % len(callsigns)
                        selected = callsigns[selected_idx]

                if reload is not None:
                    world.reset(reload)
                    callsigns = list(world.ac.keys())
                    selected_idx = 0
                    selected = callsigns[selected_idx] if callsigns else None

        # world step
        world.step(config.DT * config.SPEED_MULTIPLIER)

        render(screen, font, world, selected=selected)
        pygame.display.flip()

    world.close()
    pygame.quit()
    sys.exit(0)


if __name__ == "__main__":
    main()
