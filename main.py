import os

from loguru import logger
from fabric import Application
from fabric.utils import get_relative_path

from services.config import TitleConfig, load_config
from services.errors import ConfigError
from services.title_resolver import TitleResolver
from widgets.bar import create_bars


def config_path() -> str:
    xdg_config = os.environ.get("XDG_CONFIG_HOME") or os.path.expanduser("~/.config")
    return os.path.join(xdg_config, "glaze-title", "config.json")


def load_resolver() -> TitleResolver:
    path = config_path()
    if not os.path.exists(path):
        return TitleResolver()
    try:
        return TitleResolver(load_config(path))
    except ConfigError as e:
        logger.error(f"Falling back to default settings: {e}")
        return TitleResolver(TitleConfig())


def main():
    bars = create_bars(load_resolver())
    app = Application("glaze-title", *bars)
    app.set_stylesheet_from_file(get_relative_path("style.css"))
    app.run()


if __name__ == "__main__":
    main()
