"""In-memory annotations and the host context protocol."""

from dataclasses import asdict, dataclass, field
from typing import Protocol


class HostContext(Protocol):
    """What the plugin needs from the review tool hosting it."""

    def warn(self, message: str, file: str, line: int) -> None: ...


@dataclass(frozen=True)
class Annotation:
    message: str
    file: str
    line: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class AnnotationCollector:
    """Reporter that keeps every dispatched issue as an Annotation."""

    annotations: list[Annotation] = field(default_factory=list)

    def __call__(self, message: str, file_path: str, line: int) -> None:
        self.annotations.append(Annotation(message=message, file=file_path, line=line))

    def __len__(self) -> int:
        return len(self.annotations)

    def by_file(self) -> dict[str, int]:
        """Annotation counts keyed by file path, in first-seen order."""
        counts: dict[str, int] = {}
        for a in self.annotations:
            counts[a.file] = counts.get(a.file, 0) + 1
        return counts
