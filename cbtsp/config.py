import yaml
from pathlib import Path

DEFAULT_PATH = Path(__file__).parent / "configs" / "default.yaml"

ALGORITHMS = {
    "deterministic-construction": "deterministic-construction",
    "det-construction": "deterministic-construction",
    "random-construction": "random-construction",
    "rand-construction": "random-construction",
    "local-search": "local-search",
    "grasp": "grasp",
    "vnd": "vnd",
    "mco": "mco",
}
STEPS = ("random", "first-improvement", "best-improvement")
STRATEGIES = ("darwin", "lamarck")


def load_config(path=None):
    with open(Path(path or DEFAULT_PATH), "r") as f:
        return yaml.safe_load(f) or {}


def merge_config(base, overrides):
    """Return a copy of base with every non-None override applied (nested dicts merged)."""
    merged = dict(base)
    for key, value in overrides.items():
        if value is None:
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def validate_config(settings):
    """
    Check names and ranges of all search settings.

    Returns:
        the settings with the algorithm name canonicalized
    Raises:
        ValueError: on the first unknown name or out-of-range value
    """
    settings = dict(settings)
    settings.setdefault("seed", None)
    settings.setdefault("verbose", False)
    seed = settings["seed"]
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ValueError(f"Setting seed must be an integer, got {seed!r}")
    if not isinstance(settings["verbose"], bool):
        raise ValueError(f"Setting verbose must be true or false, got {settings['verbose']!r}")

    algorithm = settings.get("algorithm")
    if algorithm not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm: {algorithm}")
    settings["algorithm"] = ALGORITHMS[algorithm]

    if settings.get("step") not in STEPS:
        raise ValueError(f"Unknown step function: {settings.get('step')}")
    if settings.get("reinforce_strategy") not in STRATEGIES:
        raise ValueError(f"Unknown reinforcement strategy: {settings.get('reinforce_strategy')}")

    for key in ("iterations", "popsize", "runs"):
        _check_range(settings, key, low=1, integral=True)
    _check_range(settings, "evaporation", low=0.0, high=1.0)
    _check_range(settings, "elitism", low=0.0)
    _check_range(settings, "intensification", low=0.0, high=1.0)
    _check_range(settings, "objective_floor", low=0.0, inclusive_low=False)

    pheromone = settings.get("pheromone") or {}
    _check_range(pheromone, "min", low=0.0, inclusive_low=False, label="pheromone.min")
    _check_range(pheromone, "max", low=pheromone["min"], label="pheromone.max")

    for key in ("pheromone_attraction", "objective_attraction"):
        _check_range(settings, key)

    return settings


def _check_range(settings, key, low=None, high=None, integral=False, inclusive_low=True, label=None):
    label = label or key
    if key not in settings:
        raise ValueError(f"Missing setting: {label}")
    value = settings[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Setting {label} must be a number, got {value!r}")
    if integral and int(value) != value:
        raise ValueError(f"Setting {label} must be an integer, got {value}")
    if low is not None and (value < low or (value == low and not inclusive_low)):
        bound = "<" if inclusive_low else "<="
        raise ValueError(f"Setting {label} too small: {value} ({bound} {low})")
    if high is not None and value > high:
        raise ValueError(f"Setting {label} too large: {value} (> {high})")
