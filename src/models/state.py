"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing CLI stages.
"""

from argparse import Namespace
from typing import Any, Callable, List, Optional, Type, TypeVar
from dataclasses import dataclass, field
import dataclasses


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for a CLI run (state bus pattern).

    Pipeline stages and their state additions:
        - Initial: command, verbosity, noAnsi, stylesFile, name, items
        - env_check: envOK
        - styles_load: styleSheet, stylesLoaded
        - command_run: output, exitCode

    Attributes:
        command: Subcommand to run ("styles", "doc", "markup")
        verbosity: Logging verbosity level (1-3)
        noAnsi: Suppress escape codes in the output
        stylesFile: Optional YAML style sheet to merge
        name: Dotted Python name for the "doc" command
        items: Raw markup tokens for the "markup" command
        envOK: Environment validation passed
        styleSheet: Loaded StyleSheet, bound while the command runs
        stylesLoaded: Number of styles in the style sheet
        output: Text produced by the command
        exitCode: Process exit code; stages after a failure are skipped
    """

    # CLI arguments
    command: str = field(default="styles")
    verbosity: int = field(default=1)
    noAnsi: bool = field(default=False)
    stylesFile: Optional[str] = field(default=None)
    name: str = field(default="")
    items: List[str] = field(default_factory=list)

    # Pipeline state
    envOK: bool = field(default=False)
    styleSheet: Optional[Any] = field(default=None)
    stylesLoaded: int = field(default=0)
    output: str = field(default="")
    exitCode: int = field(default=0)

    @classmethod
    def state_createFromNamespace(cls: Type[PS], options: Namespace) -> PS:
        """
        Create ProgramState from an argparse Namespace.

        Options without a matching field are ignored.

        Args:
            options: Parsed CLI arguments

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields and v is not None}
        return cls(**filtered_options)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(initial_state: ProgramState, *stages: Callable[[Any], Any]) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(initial_state, env_check, styles_load, command_run)

    This is equivalent to:
        command_run(styles_load(env_check(initial_state)))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
