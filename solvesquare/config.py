"""Configuration classes for SolveSquare components."""

from dataclasses import dataclass


@dataclass
class InputConfig:
    """Configuration for interactive coefficient input."""

    # Attempts allowed per variable before the run is abandoned
    max_tries: int = 3

    def validate(self) -> None:
        """Raise ValueError if the configuration cannot be used."""
        if self.max_tries < 1:
            raise ValueError(f"max_tries must be at least 1, got {self.max_tries}")


# Global configuration instance
INPUT_CONFIG = InputConfig()
