"""Configuration management for percolation runs."""

from pathlib import Path
import os

from pydantic import BaseModel, Field, model_validator


class SimulationConfig(BaseModel):
    """Configuration for a single random simulation."""

    grid_size: int = Field(default=20, ge=1, description="Side length of the grid")
    probability: float = Field(default=0.6, ge=0.0, le=1.0, description="Site opening probability")
    seed: int | None = Field(default=None, description="Seed for the random source")


class SweepConfig(BaseModel):
    """Configuration for Monte Carlo probability sweeps."""

    trials: int = Field(default=50, ge=1, description="Trials per probability")
    start: float = Field(default=0.0, ge=0.0, le=1.0, description="First probability")
    stop: float = Field(default=1.0, ge=0.0, le=1.0, description="Last probability")
    step: float = Field(default=0.05, gt=0.0, le=1.0, description="Probability increment")

    @model_validator(mode="after")
    def check_range(self) -> "SweepConfig":
        if self.start > self.stop:
            raise ValueError(f"start ({self.start}) must not exceed stop ({self.stop})")
        return self


class RenderConfig(BaseModel):
    """Configuration for grid images."""

    dpi: int = Field(default=300, ge=1, description="DPI for saved figures")
    figure_size: tuple[int, int] = Field(default=(8, 8), description="Default figure size")
    closed_color: str = Field(default="black", description="Color of closed sites")
    open_color: str = Field(default="white", description="Color of open sites")
    full_color: str = Field(default="#4a90d9", description="Color of sites connected to the top")


class Config(BaseModel):
    """Main configuration for the percolation tool."""

    simulation: SimulationConfig = Field(default_factory=SimulationConfig)
    sweep: SweepConfig = Field(default_factory=SweepConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)

    @classmethod
    def from_json(cls, config_path: Path) -> "Config":
        """Read and validate a JSON configuration file.

        Sections missing from the file keep their defaults.

        Raises:
            FileNotFoundError: If the file does not exist
            pydantic.ValidationError: If the JSON is malformed or a value is invalid
        """
        if not config_path.is_file():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return cls.model_validate_json(config_path.read_text(encoding="utf-8"))

    def write_json(self, config_path: Path) -> Path:
        """Write the configuration as indented JSON, creating parent directories."""
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return config_path


CONFIG_ENV_VAR = "PERCOLATION_CONFIG"


def config_search_paths() -> list[Path]:
    """Locations checked for a configuration file, highest priority first.

    ``$PERCOLATION_CONFIG`` comes first when set, then the user config
    directory, then ``percolation.json`` in the working directory.
    """
    paths = []
    if os.environ.get(CONFIG_ENV_VAR):
        paths.append(Path(os.environ[CONFIG_ENV_VAR]))
    paths.append(Path.home() / ".config" / "percolation" / "config.json")
    paths.append(Path.cwd() / "percolation.json")
    return paths


def load_config(config_path: Path | None = None) -> Config:
    """Load the run configuration.

    An explicit path must exist. Without one, the first existing file from
    config_search_paths() is used, and the built-in defaults when none exists.
    """
    if config_path is not None:
        return Config.from_json(config_path)

    found = next((path for path in config_search_paths() if path.is_file()), None)
    return Config.from_json(found) if found else Config()
