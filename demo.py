#!/usr/bin/env python3
"""Watch a random player move, open and flag its way through a game."""
import time
import os

from sweeper import BoardConfig, SweeperEnv


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(
    delay: float = 0.1,
    games: int = 3,
    width: int = 9,
    height: int = 9,
    mines: int = 10,
    max_steps: int = 500,
    seed: int = None,
):
    """Run demo games with visualization."""
    config = BoardConfig(width=width, height=height, num_mines=mines)
    env = SweeperEnv(config=config, render_mode="ansi")
    env.action_space.seed(seed)

    print(f"Board: {width}x{height} with {mines} mines")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        obs, info = env.reset(seed=None if seed is None else seed + game)
        done = False
        step = 0

        while not done and step < max_steps:
            action = env.action_space.sample()
            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}\n")
            print(env.render())

            if done:
                if info["status"] == "WON":
                    wins += 1
                    print(f"\n*** WIN! ***")
                else:
                    print(f"\n*** LOST (hit mine) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.1, help="Delay between moves")
    parser.add_argument("--games", type=int, default=3, help="Number of games")
    parser.add_argument("--width", type=int, default=9, help="Board width")
    parser.add_argument("--height", type=int, default=9, help="Board height")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--steps", type=int, default=500, help="Step limit per game")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    demo(
        delay=args.delay,
        games=args.games,
        width=args.width,
        height=args.height,
        mines=args.mines,
        max_steps=args.steps,
        seed=args.seed,
    )
