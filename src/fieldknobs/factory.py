"""Build validators from configuration.

Validators can be declared in a YAML or JSON file and loaded by name:

    ```yaml
    validators:
      username:
        type: string
        regex_pattern: USERNAME
        min_string_length: 3
        max_string_length: 20
      display_name:
        type: string
        max_words_count: 4
        custom_validation_fn: myapp.checks.is_polite
      age:
        type: number
        min_value: 13
        max_value: 120
        is_integer: true
    ```

Each entry builds one independent validator; entries never refer to each
other. ``custom_validation_fn`` may be given as a dotted import path.
"""

from __future__ import annotations

import importlib
import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Union

import yaml  # type: ignore[import-untyped]

from fieldknobs.exceptions import ConfigurationError
from fieldknobs.number_validator import NumberValidator
from fieldknobs.string_validator import StringValidator

logger = logging.getLogger(__name__)

Validator = Union[StringValidator, NumberValidator]


class ValidatorFactory:
    """Factory for creating validators from configuration.

    Configuration Options:
        type (str): ``"string"`` or ``"number"`` (default: ``"string"``)
        name (str): Optional validator name, used only for logging
        Any other key is passed through as a validator option.

    Example:
        ```python
        factory = ValidatorFactory()
        age = factory.create(type="number", min_value=0, is_integer=True)
        age(42).is_valid
        # True
        ```
    """

    validator_types: Dict[str, Callable[..., Validator]] = {
        "string": StringValidator,
        "number": NumberValidator,
    }

    def create(self, **config: Any) -> Validator:
        """Create a validator from configuration.

        Args:
            **config: Validator type plus its options

        Returns:
            StringValidator or NumberValidator

        Raises:
            ConfigurationError: If the type is unknown, an option is not
                recognized, or a custom function cannot be imported
        """
        config = dict(config)
        validator_type = str(config.pop("type", "string")).lower()
        name = config.pop("name", None)

        validator_cls = self.validator_types.get(validator_type)
        if validator_cls is None:
            raise ConfigurationError(
                f"Unknown validator type: {validator_type}",
                context={"type": validator_type, "available_types": list(self.validator_types)},
            )

        custom_fn = config.get("custom_validation_fn")
        if isinstance(custom_fn, str):
            config["custom_validation_fn"] = self._load_callable(custom_fn)

        validator = validator_cls(config)
        logger.info(f"Created {validator_type} validator: {name or '<unnamed>'}")
        return validator

    def _load_callable(self, path: str) -> Callable[..., Any]:
        """Import a callable from a dotted path such as ``"mypkg.checks.fn"``.

        Raises:
            ConfigurationError: If the path is malformed, the module cannot be
                imported, or the attribute is missing or not callable
        """
        if "." not in path:
            raise ConfigurationError(
                f"Invalid callable path: {path}", context={"path": path}
            )

        module_path, attr_name = path.rsplit(".", 1)
        try:
            module = importlib.import_module(module_path)
        except ImportError as e:
            raise ConfigurationError(
                f"Failed to import {path}: {e}", context={"path": path}
            ) from e

        fn = getattr(module, attr_name, None)
        if not callable(fn):
            raise ConfigurationError(
                f"{attr_name} in {module_path} is missing or not callable",
                context={"path": path},
            )
        return fn


def _read_config_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigurationError(
            f"Validator configuration file not found: {path}", context={"path": str(path)}
        )

    with open(path) as f:
        if path.suffix in [".yaml", ".yml"]:
            data = yaml.safe_load(f) or {}
        elif path.suffix == ".json":
            data = json.load(f)
        else:
            raise ConfigurationError(
                f"Unsupported configuration file format: {path.suffix}",
                context={"path": str(path)},
            )

    if not isinstance(data, Mapping):
        raise ConfigurationError(
            f"Validator configuration must be a mapping, got {type(data).__name__}",
            context={"path": str(path), "config_type": type(data).__name__},
        )

    logger.info(f"Loaded validator configuration from {path}")
    return data


def load_validators(
    source: Union[str, Path, Mapping[str, Any]],
    factory: ValidatorFactory | None = None,
) -> Dict[str, Validator]:
    """Build every validator declared under a ``validators`` key.

    Args:
        source: Path to a YAML/JSON file, or an already-loaded mapping
        factory: Factory to build with (default: a new ``ValidatorFactory``)

    Returns:
        Mapping of validator name to validator, in declaration order

    Raises:
        ConfigurationError: If the file cannot be read or any entry is invalid
    """
    if isinstance(source, (str, Path)):
        data: Mapping[str, Any] = _read_config_file(Path(source))
    else:
        data = source
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"Validator configuration must be a mapping, got {type(data).__name__}",
                context={"config_type": type(data).__name__},
            )

    entries = data.get("validators", {})
    if not isinstance(entries, Mapping):
        raise ConfigurationError(
            "'validators' must be a mapping of name to validator configuration",
            context={"validators_type": type(entries).__name__},
        )

    factory = factory or ValidatorFactory()
    validators: Dict[str, Validator] = {}
    for name, entry in entries.items():
        if not isinstance(entry, Mapping):
            raise ConfigurationError(
                f"Validator '{name}' configuration must be a mapping",
                context={"validator": name},
            )
        try:
            validators[name] = factory.create(**{**entry, "name": name})
        except ConfigurationError as e:
            e.context.setdefault("validator", name)
            raise
    return validators
