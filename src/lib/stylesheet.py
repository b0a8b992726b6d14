"""
Style sheet loader for clansi

A style sheet is a YAML file that defines styles (and optionally extra raw
directives) so applications can keep their color scheme out of the code:

    codes:
      bg-bright-black: "[100m"
    styles:
      warning: [yellow, bright]
      error: [red, bright, underline]
      hint: cyan

A sheet without a ``styles:`` key is read as a plain style mapping.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

import yaml

from .codes import ANSI_CODES, codes_bind, codes_get
from .log import LOG
from .styles import StyleValue, styles_bind, styles_extend


class StyleSheetError(Exception):
    """Raised when style sheet loading or validation fails"""
    pass


class StyleSheet:
    """
    Represents a clansi style sheet.

    A style sheet consists of:
      - styles: style name -> directive name or list of directive names
      - codes: optional extra raw directives (name -> SGR fragment)
    """

    def __init__(self, path: Union[str, Path]):
        """
        Load a style sheet from a YAML file.

        Args:
            path: Path to the YAML file

        Raises:
            StyleSheetError: If the file is missing, unparsable or malformed
        """
        self.path = Path(path).expanduser()

        if not self.path.exists():
            raise StyleSheetError(f"Style sheet not found: {self.path}")

        config = self._config_load()
        self.codes: Dict[str, str] = self._codes_validate(config.get("codes", {}))
        if "styles" in config or "codes" in config:
            raw_styles = config.get("styles", {})
        else:
            raw_styles = config
        self.styles: Dict[str, StyleValue] = self._styles_validate(raw_styles)

    def _config_load(self) -> Dict[str, Any]:
        """Load and parse the YAML file"""
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                config: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise StyleSheetError(f"Failed to parse {self.path.name}: {e}")
        except OSError as e:
            raise StyleSheetError(f"Failed to load {self.path.name}: {e}")

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise StyleSheetError(f"{self.path.name}: expected a mapping at top level")
        return config

    def _codes_validate(self, codes: Any) -> Dict[str, str]:
        if not isinstance(codes, dict):
            raise StyleSheetError(f"{self.path.name}: 'codes' must be a mapping")
        for name, fragment in codes.items():
            if not isinstance(fragment, str):
                raise StyleSheetError(
                    f"{self.path.name}: code '{name}' must be a string like \"[31m\""
                )
        return {str(name): fragment for name, fragment in codes.items()}

    def _styles_validate(self, styles: Any) -> Dict[str, StyleValue]:
        if not isinstance(styles, dict):
            raise StyleSheetError(f"{self.path.name}: 'styles' must be a mapping")

        validated: Dict[str, StyleValue] = {}
        for name, value in styles.items():
            if isinstance(value, str):
                validated[str(name)] = value
            elif isinstance(value, list) and all(isinstance(v, str) for v in value):
                validated[str(name)] = list(value)
            else:
                raise StyleSheetError(
                    f"{self.path.name}: style '{name}' must be a directive name "
                    f"or a list of directive names"
                )
        return validated

    def unknown_list(self, codes: Optional[Mapping[str, str]] = None) -> List[str]:
        """
        List directive names used by the sheet's styles that don't exist.

        Styles expand to directives only, so a style naming another style
        is flagged too. Unknown names still render (as reset).
        """
        known = dict(codes_get() if codes is None else codes)
        known.update(self.codes)

        unknown: List[str] = []
        for value in self.styles.values():
            names = [value] if isinstance(value, str) else value
            for name in names:
                if name not in known and name not in unknown:
                    unknown.append(name)
        return unknown

    def unknown_log(self) -> None:
        for name in self.unknown_list():
            LOG(f"{self.path.name}: unknown directive '{name}' will render as reset", level=2)

    def styles_merge(self) -> None:
        """
        Install the sheet for the whole process.

        Registers the sheet's codes in ANSI_CODES and overlays its styles on
        the root style table. Use bind() to install it for one block only.
        """
        ANSI_CODES.update(self.codes)
        self.unknown_log()
        styles_extend(self.styles)
        LOG(f"Merged {len(self.styles)} styles from {self.path}", level=2)

    @contextmanager
    def bind(self) -> Iterator[None]:
        """
        Install the sheet for the extent of a with-block.

        Codes and styles are bound to the current thread or task and removed
        on exit; ANSI_CODES and the root style table are left untouched.
        """
        with codes_bind(self.codes):
            self.unknown_log()
            with styles_bind(self.styles, merge=True):
                LOG(f"Bound {len(self.styles)} styles from {self.path}", level=2)
                yield

    def __repr__(self) -> str:
        return f"StyleSheet(path='{self.path}', styles={len(self.styles)})"
