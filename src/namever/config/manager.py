from pathlib import Path
import copy, json, os

APP_DIR = Path(os.getenv('APPDATA', '.')) / 'FileNameVersioning'
CFG_PATH = APP_DIR / 'config.json'

DEFAULTS = {
  "input": {"separator": ","},
  "output": {"format": "lines"},
  "logging": {"level": "WARNING"}
}

OUTPUT_FORMATS = ("lines", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

class ConfigError(Exception):
    pass

def get_config_path() -> Path:
    env = os.getenv('NAMEVER_CONFIG')
    return Path(env) if env else CFG_PATH

def _merge(defaults: dict, stored: dict) -> dict:
    cfg = copy.deepcopy(defaults)
    for key, value in stored.items():
        if key in defaults and not isinstance(value, dict):
            raise ConfigError(f"Config section '{key}' must be a JSON object")
        if isinstance(value, dict) and isinstance(cfg.get(key), dict):
            cfg[key].update(value)
        else:
            cfg[key] = value
    return cfg

def _validate(cfg: dict) -> dict:
    sep = cfg["input"]["separator"]
    if not isinstance(sep, str) or not sep:
        raise ConfigError("input.separator must be a non-empty string")
    if cfg["output"]["format"] not in OUTPUT_FORMATS:
        raise ConfigError(f"output.format must be one of {', '.join(OUTPUT_FORMATS)}")
    if cfg["logging"]["level"] not in LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of {', '.join(LOG_LEVELS)}")
    return cfg

def load_config(path: Path | None = None) -> dict:
    path = Path(path) if path else get_config_path()
    try:
        raw = path.read_text(encoding='utf-8')
    except FileNotFoundError:
        save_config(DEFAULTS, path)
        return copy.deepcopy(DEFAULTS)
    try:
        stored = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e
    if not isinstance(stored, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    return _validate(_merge(DEFAULTS, stored))

def save_config(cfg: dict, path: Path | None = None) -> None:
    path = Path(path) if path else get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(cfg, ensure_ascii=False, indent=2), encoding='utf-8')
