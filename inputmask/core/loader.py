# inputmask/core/loader.py

"""Token alphabet loader for the mask engine."""

import re
import yaml
import logging
import threading
from pathlib import Path
from typing import Dict, Any, Optional, Pattern, Union

from inputmask.core.definitions import TokenType
from inputmask.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_TOKENS_PATH = Path(__file__).parent / "tokens.yaml"


class TokenLoader:
    """Loader for the token alphabet defined in tokens.yaml.

    Each token maps a single template character to a regex tested against
    one input character. Use get_instance() for the shared, lazily loaded
    alphabet; construct directly to load an alternative file.
    """

    _instance: Optional["TokenLoader"] = None
    _lock = threading.Lock()

    def __init__(self, config_path: Optional[Union[str, Path]] = None) -> None:
        self.is_bundled = not config_path
        self.config_path = Path(config_path) if config_path else DEFAULT_TOKENS_PATH
        self._config: Dict[str, Any] = {}
        self._patterns: Dict[str, Pattern] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Loads and compiles the token definitions.

        Raises:
            ConfigurationError: If file is missing, invalid, or empty.
        """
        config_path = self.config_path

        if not config_path.exists():
            error_msg = f"Token configuration file not found: {config_path}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg)

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error: {e}", exc_info=True)
            raise ConfigurationError(f"Failed to parse {config_path.name}: {e}") from e
        except OSError as e:
            logger.error(f"Token configuration loading failed: {e}", exc_info=True)
            raise ConfigurationError(f"Failed to load token configuration: {e}") from e

        if not self._config:
            raise ConfigurationError("Token configuration file is empty or invalid")

        self._validate_config()
        self._patterns = self._compile_patterns()

        logger.info(
            "Token configuration loaded successfully",
            extra={
                "config_path": str(config_path),
                "token_count": len(self._patterns),
            },
        )

    def _validate_config(self) -> None:
        """Validates the tokens section and each token entry.

        Raises:
            ConfigurationError: If the section or an entry is malformed.
        """
        if not isinstance(self._config, dict) or "tokens" not in self._config:
            error_msg = "Missing required configuration section: 'tokens'"
            logger.error(error_msg)
            raise ConfigurationError(error_msg)

        tokens = self._config["tokens"]
        if not isinstance(tokens, dict) or not tokens:
            raise ConfigurationError("'tokens' must be a non-empty mapping")

        for token, entry in tokens.items():
            if not isinstance(token, str) or len(token) != 1:
                error_msg = f"Token keys must be single characters, got {token!r}"
                logger.error(error_msg)
                raise ConfigurationError(error_msg)

            if not isinstance(entry, dict) or not entry.get("regex"):
                error_msg = f"Token {token!r} has no 'regex' defined"
                logger.error(error_msg)
                raise ConfigurationError(error_msg)

        # The bundled file must define the whole default alphabet
        if self.is_bundled:
            missing = [t for t in TokenType.ALL if t not in tokens]
            if missing:
                error_msg = f"Bundled token configuration is missing tokens: {missing}"
                logger.error(error_msg)
                raise ConfigurationError(error_msg)

    def _compile_patterns(self) -> Dict[str, Pattern]:
        # DOTALL so a bare "." accepts any single character, newline included
        patterns: Dict[str, Pattern] = {}
        for token, entry in self._config["tokens"].items():
            try:
                patterns[token] = re.compile(str(entry["regex"]), re.DOTALL)
            except re.error as e:
                logger.error(f"Failed to compile regex for token {token!r}: {e}")
                raise ConfigurationError(
                    f"Invalid regex for token {token!r}: {e}"
                ) from e
        return patterns

    @classmethod
    def get_instance(cls) -> "TokenLoader":
        """Returns the shared loader built from the configured tokens file."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    # Lazy import to keep core free of service-layer imports
                    from inputmask.service.config import settings

                    cls._instance = cls(settings.tokens_file)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drops the shared loader so the next access reloads configuration."""
        with cls._lock:
            cls._instance = None

    def get_patterns(self) -> Dict[str, Pattern]:
        """Returns a copy of the compiled token -> regex mapping."""
        return dict(self._patterns)

    def get_description(self, token: str) -> str:
        """Returns the human readable description of a token, or '' if unknown.

        Args:
            token: Template character (e.g., 'N')
        """
        entry = self._config.get("tokens", {}).get(token, {})
        return entry.get("description", "") if entry else ""
