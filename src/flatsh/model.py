# src/flatsh/model.py (Shell Layer)
from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- Builtin actions ---

class ExitAction(_Frozen):
    action: Literal["exit"] = "exit"
    code: int = Field(default=0, ge=0, le=255, description="Process exit status.")


class EchoAction(_Frozen):
    action: Literal["echo"] = "echo"
    text: str = Field(default="", description="Raw remainder of the line, spacing preserved.")


class TypeAction(_Frozen):
    """
    The 'type' builtin. `target` is None only for 'type type'; otherwise it
    holds the resolved command named by the argument.
    """
    action: Literal["type"] = "type"
    target: Optional["Command"] = None

    @model_validator(mode="after")
    def _one_level_only(self) -> "TypeAction":
        target = self.target
        if (
            target is not None
            and isinstance(target.kind, Builtin)
            and isinstance(target.kind.action, TypeAction)
            and target.kind.action.target is not None
        ):
            raise ValueError("a type target cannot carry a nested type target")
        return self


class PwdAction(_Frozen):
    action: Literal["pwd"] = "pwd"


class CdAction(_Frozen):
    action: Literal["cd"] = "cd"
    path: str = Field(default="", description="Raw, unexpanded directory argument.")


BuiltinAction = Annotated[
    Union[ExitAction, EchoAction, TypeAction, PwdAction, CdAction],
    Field(discriminator="action"),
]


# --- Command kinds ---

class Builtin(_Frozen):
    kind: Literal["builtin"] = "builtin"
    action: BuiltinAction


class External(_Frozen):
    kind: Literal["external"] = "external"
    resolved_path: str = Field(description="Absolute path of the executable that was found.")
    argv: Tuple[str, ...] = Field(description="argv[0] is the invoking name, the rest are its arguments.")


class NotFound(_Frozen):
    kind: Literal["not_found"] = "not_found"


CommandKind = Annotated[Union[Builtin, External, NotFound], Field(discriminator="kind")]


class Command(_Frozen):
    """A single resolved input line: the invoking name plus what it means."""
    name: str = Field(min_length=1, description="The token the command was invoked with.")
    kind: CommandKind

    @model_validator(mode="after")
    def _argv_starts_with_name(self) -> "Command":
        if isinstance(self.kind, External):
            if not self.kind.argv or self.kind.argv[0] != self.name:
                raise ValueError("external argv[0] must equal the command name")
        return self


TypeAction.model_rebuild()
Builtin.model_rebuild()
Command.model_rebuild()
