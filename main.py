import moderngl_window as mglw
import moderngl_window as mglw
from sgrender.renderer.scene_window import SceneWindow
from sgrender.renderer.scene_window import SceneWindow

if __name__ == "__main__":
    mglw.run_window_config(SceneWindow)
#   mglw.run_window_config(SceneWindow)
    pass
#   pass
