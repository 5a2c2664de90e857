# Space Shooter
# ===============================================================#
# Controls:
# Move: WASD/Arrows (or mouse, see Settings) | Slow: SHIFT | Fire: automatic
# Menu: ENTER start, S settings | Game over: R restart, M menu | Quit: ESC

from space_shooter.app import main

if __name__ == "__main__":
    main()
