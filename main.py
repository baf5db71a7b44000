import sys
import argparse
import logging

# Engine imports
from chamber.config import load_config
from chamber.constants import DEFAULT_H2_COUNT, DEFAULT_CL2_COUNT, DEFAULT_TEMPERATURE_C, LOGGING_LEVEL
from chamber.simulation_manager import SimulationManager

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="H2 + Cl2 -> 2 HCl reaction chamber.")
    parser.add_argument("--gui", action="store_true", help="Open the interactive window")
    parser.add_argument("--temperature", type=float, default=DEFAULT_TEMPERATURE_C, help="Temperature in Celsius")
    parser.add_argument("--h2", type=int, default=DEFAULT_H2_COUNT, help="Initial H2 molecules")
    parser.add_argument("--cl2", type=int, default=DEFAULT_CL2_COUNT, help="Initial Cl2 molecules")
    parser.add_argument("--ticks", type=int, default=500, help="Number of ticks for a headless run")
    parser.add_argument("--trap", action="store_true", help="Enable trap mode")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--config", type=str, default=None, help="JSON file with chamber config overrides")
    parser.add_argument("--save-frame", type=str, default=None, help="Save the final frame as PNG")
    parser.add_argument("--log-level", type=str, default=LOGGING_LEVEL, help="DEBUG, INFO, WARNING or ERROR")
    return parser


def run_headless(args) -> SimulationManager:
    """
    Run the chamber for --ticks ticks and print the composition summary.
    """
    sim = SimulationManager(h2_count=args.h2, cl2_count=args.cl2, temperature_c=args.temperature,
                            trap_mode=args.trap, config=load_config(args.config), seed=args.seed)
    snapshot = sim.run_steps(n_steps=args.ticks)

    for line in sim.diagnostics():
        print(line)
    print(f"Reaction rate (last 60 frames): {sim.metrics.reaction_rate():.4f} per frame")

    if args.save_frame and snapshot is not None:
        import matplotlib
        matplotlib.use("Agg")
        from visual.renderer import save_frame_png
        save_frame_png(snapshot, args.save_frame, diagnostics=sim.diagnostics())
        print(f"Frame saved to {args.save_frame}")
    return sim


def launch_gui(args):
    """
    Launch the classroom window.
    """
    from gui.simulation_gui import ChamberGUI
    sim = SimulationManager(h2_count=args.h2, cl2_count=args.cl2, temperature_c=args.temperature,
                            trap_mode=args.trap, config=load_config(args.config), seed=args.seed)
    ChamberGUI(sim).start()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.INFO),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if args.gui:
        launch_gui(args)
    else:
        run_headless(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
