#!/usr/bin/env python3
"""
Example usage of the lifeterm package.
"""

from lifeterm import GameOfLife, Grid, PatternLibrary


def main():
    """Demonstrate programmatic usage of the lifeterm package."""
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    # Place the glider near the top-left corner of a bounded 12x12 grid
    game = GameOfLife(glider.to_grid(12, 12, offset_x=1, offset_y=1))

    print("Initial state:")
    print(game.grid)
    print(f"Population: {game.population}")
    print()

    # The glider travels down-right until it hits the bottom edge
    for _ in range(40):
        game.step()
        if game.generation % 4 == 0:
            print(f"Generation {game.generation}: live cells {game.live_cells()}")
        if game.population == 0:
            break

    print()
    print(f"Final state (generation {game.generation}):")
    print(game.grid)

    # Text dumps parse back into grids
    assert Grid.from_text(str(game.grid)) == game.grid


if __name__ == "__main__":
    main()
