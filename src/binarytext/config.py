from dataclasses import dataclass
from typing import Dict, List, Literal, Optional

from .base16 import CASES, Case
from .errors import ConfigurationError

Algorithm = Literal["base16", "base32", "base32hex", "base64", "base64url", "ascii85"]
Task = Literal["encode-text", "encode-binary", "decode-text", "decode-binary"]

ALGORITHMS: List[str] = ["base16", "base32", "base32hex", "base64", "base64url", "ascii85"]
TASKS: List[str] = ["encode-text", "encode-binary", "decode-text", "decode-binary"]
PADDED_ALGORITHMS = {"base32", "base32hex", "base64", "base64url"}
DEFAULT_ALGORITHM: Algorithm = "base16"


def is_encode_task(task: str) -> bool:
    return task.startswith("encode")


@dataclass
class CodecConfiguration:
    """
    Options for one encode/decode call.

    Fields left as None were not chosen by the caller; ``resolve`` fills them
    with the defaults for the task and algorithm after checking that every
    chosen option applies.
    """

    algorithm: str = DEFAULT_ALGORITHM
    case: Optional[Case] = None
    padding: Optional[bool] = None
    fold_spaces: Optional[bool] = None
    adobe_mode: Optional[bool] = None

    def to_dict(self) -> Dict[str, object]:
        return {
            "algorithm": self.algorithm,
            "case": self.case,
            "padding": self.padding,
            "fold_spaces": self.fold_spaces,
            "adobe_mode": self.adobe_mode,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "CodecConfiguration":
        return cls(
            algorithm=str(data.get("algorithm") or DEFAULT_ALGORITHM),
            case=data.get("case"),  # type: ignore[arg-type]
            padding=data.get("padding"),  # type: ignore[arg-type]
            fold_spaces=data.get("fold_spaces"),  # type: ignore[arg-type]
            adobe_mode=data.get("adobe_mode"),  # type: ignore[arg-type]
        )

    def validate(self, task: str) -> None:
        """Reject options that do not apply to this algorithm or task."""
        if task not in TASKS:
            raise ConfigurationError(f"Invalid task: {task!r}")
        if self.algorithm not in ALGORITHMS:
            raise ConfigurationError(f"Invalid algorithm: {self.algorithm!r}")
        encoding = is_encode_task(task)

        if self.case is not None:
            if self.algorithm != "base16":
                raise ConfigurationError(f'Conflicting arguments: "--case" and "--algorithm={self.algorithm}"')
            if self.case not in CASES:
                raise ConfigurationError(f"Invalid case: {self.case!r}")
            if self.case == "mixed" and encoding:
                raise ConfigurationError(f'Conflicting arguments: "--case=mixed" and "--{task}"')

        if self.padding is not None:
            if self.algorithm not in PADDED_ALGORITHMS:
                raise ConfigurationError(
                    f'Conflicting arguments: "--without-padding" and "--algorithm={self.algorithm}"'
                )
            if not encoding:
                raise ConfigurationError(f'Conflicting arguments: "--without-padding" and "--{task}"')

        if self.algorithm != "ascii85":
            if self.fold_spaces is not None:
                raise ConfigurationError(
                    f'Conflicting arguments: "--fold-spaces" and "--algorithm={self.algorithm}"'
                )
            if self.adobe_mode is not None:
                raise ConfigurationError(
                    f'Conflicting arguments: "--adobe-mode" and "--algorithm={self.algorithm}"'
                )

    def resolve(self, task: str) -> "CodecConfiguration":
        """Validate, then return a copy with every option that applies filled in."""
        self.validate(task)
        resolved = CodecConfiguration(algorithm=self.algorithm)
        if self.algorithm == "base16":
            resolved.case = self.case or ("uppercase" if is_encode_task(task) else "mixed")
        elif self.algorithm in PADDED_ALGORITHMS:
            resolved.padding = True if self.padding is None else self.padding
        else:
            resolved.fold_spaces = bool(self.fold_spaces)
            resolved.adobe_mode = bool(self.adobe_mode)
        return resolved

    def codec_options(self, task: str) -> Dict[str, object]:
        """Keyword arguments for the codec call matching ``task``."""
        if self.algorithm == "base16":
            return {"case": self.case}
        if self.algorithm in PADDED_ALGORITHMS:
            return {"padding": self.padding} if is_encode_task(task) else {}
        return {"fold_spaces": self.fold_spaces, "adobe_mode": self.adobe_mode}


def default_configuration(task: str, algorithm: str = DEFAULT_ALGORITHM) -> CodecConfiguration:
    return CodecConfiguration(algorithm=algorithm).resolve(task)

