"""
main.py — Bootstrap

1. Load tuning values (data/tuning.toml)
2. Create the app window
3. Push the walk scene (preload → create)
4. Run

Missing art?  ``python data/generate_assets.py`` writes placeholder
assets with the same names, sizes and map layout.
"""

from core import tuning
from core import constants as C
from core.app import App
from scenes.walk_scene import WalkScene


def main():
    tuning.load()

    app = App(
        title=tuning.get("window", "title", C.WINDOW_TITLE),
        width=int(tuning.get("window", "width", C.SCREEN_WIDTH)),
        height=int(tuning.get("window", "height", C.SCREEN_HEIGHT)),
        fps=int(tuning.get("window", "fps", C.FPS)),
        background=tuple(tuning.get("window", "background", C.BACKGROUND)),
    )

    app.push_scene(WalkScene())
    app.run()


if __name__ == "__main__":
    main()
