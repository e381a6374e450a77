"""
Run Mini Pong without a display and print a few snapshots
"""

from mini_pong.core.game_loop import GameLoop
from mini_pong.core.headless import FixedClock
from mini_pong.core.headless import RecordingRenderer


def run_headless_game(delta: float = 16.0, ticks: int = 120) -> None:
    """Simulate ``ticks`` frames of ``delta`` milliseconds each"""
    print(f"Simulating {ticks} ticks of {delta} ms...")

    renderer = RecordingRenderer()
    GameLoop(FixedClock(delta, ticks), renderer).run()

    for index, state in enumerate(renderer.states):
        if index % 30 == 0:
            ball = state.ball
            print(
                f"tick {index:4d}: ball=({ball.x:7.2f}, {ball.y:7.2f}) "
                f"v=({ball.vx:+.2f}, {ball.vy:+.2f}) "
                f"paddles y=({state.paddle_left.y:.1f}, {state.paddle_right.y:.1f})"
            )


if __name__ == "__main__":
    run_headless_game()
