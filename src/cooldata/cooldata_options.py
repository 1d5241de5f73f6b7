"""Parser configuration options."""

from dataclasses import dataclass

STRICT_MAX_DEPTH = 64


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Settings controlling how the parser treats its input.

    Attributes:
        max_depth: Deepest allowed nesting of objects and lists below the document
            root. `None` imposes no limit, so depth is bounded only by the Python
            recursion limit.
    """

    max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")

    @staticmethod
    def strict() -> "ParserOptions":
        return ParserOptions(max_depth=STRICT_MAX_DEPTH)
