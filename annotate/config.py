from __future__ import annotations
import json, logging, os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Dict, Any, Tuple


CONFIG_DIR = Path.home() / ".config" / "annotate"
CONFIG_PATH = CONFIG_DIR / "config.json"

DEFAULT_MAX_FONT_SIZE = 72
DEFAULT_DPI = 81.58
DEFAULT_LINE_HEIGHT = 0.25   # em; the gap between lines scales with the chosen size

log = logging.getLogger("annotate.config")


def _env_path(name: str) -> Optional[Path]:
    v = os.environ.get(name, "")
    return Path(v) if v else None


@dataclass
class Config:
    # Fitting
    max_font_size: int = field(default_factory=lambda: int(os.environ.get("ANNOTATE_MAX_FONT_SIZE", DEFAULT_MAX_FONT_SIZE)))
    dpi: float = field(default_factory=lambda: float(os.environ.get("ANNOTATE_DPI", DEFAULT_DPI)))
    line_height: float = field(default_factory=lambda: float(os.environ.get("ANNOTATE_LINE_HEIGHT", DEFAULT_LINE_HEIGHT)))
    strict_fit: bool = False

    # Drawing
    font_path: Optional[Path] = field(default_factory=lambda: _env_path("ANNOTATE_FONT"))
    fill_color: Tuple[int, int, int, int] = (0, 0, 0, 255)

    # Logging
    log_level: str = field(default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper())


class ConfigManager:
    """Load / save configuration as JSON. Missing keys keep their defaults."""

    @staticmethod
    def load(path: Path = CONFIG_PATH) -> Config:
        c = Config()
        path = Path(path)
        if not path.exists():
            return c
        try:
            d = json.loads(path.read_text(encoding="utf-8"))
            c.max_font_size = int(d.get("max_font_size", c.max_font_size))
            c.dpi = float(d.get("dpi", c.dpi))
            c.line_height = float(d.get("line_height", c.line_height))
            c.strict_fit = bool(d.get("strict_fit", c.strict_fit))
            fp = d.get("font_path") or ""
            c.font_path = Path(fp) if fp else c.font_path
            c.fill_color = tuple(int(v) for v in d.get("fill_color", c.fill_color))
            c.log_level = str(d.get("log_level", c.log_level)).upper()
        except (OSError, ValueError, TypeError, AttributeError) as e:
            log.warning("Ignoring unreadable config %s: %s", path, e)
            return Config()
        return c

    @staticmethod
    def save(c: Config, path: Path = CONFIG_PATH) -> None:
        data: Dict[str, Any] = {
            "max_font_size": c.max_font_size,
            "dpi": c.dpi,
            "line_height": c.line_height,
            "strict_fit": c.strict_fit,
            "font_path": str(c.font_path) if c.font_path else "",
            "fill_color": list(c.fill_color),
            "log_level": c.log_level,
        }
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
