from pathlib import Path


class AiRulesError(Exception):
    """Base user-facing application error."""


class UnknownTechnologyError(AiRulesError):
    def __init__(self, technology: str, source_root: Path) -> None:
        self.technology = technology
        self.source_root = source_root
        super().__init__(
            f"Technology directory not found: {technology} (looked in {source_root})"
        )


class UnknownTargetError(AiRulesError):
    def __init__(self, target: str, available: list[str]) -> None:
        self.target = target
        super().__init__(
            f"Unknown target: {target}. Available: {', '.join(available)}"
        )


class AiRulesFileError(AiRulesError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingSourceError(AiRulesFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Canonical rules source not found")


class MissingManifestError(AiRulesFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(
            path=path, message="No ai-rules installation found (run init first)"
        )


class InvalidJsonFormatError(AiRulesFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid JSON format ({detail})")


class InvalidManifestError(AiRulesFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid install manifest ({detail})")


class InvalidTechCatalogError(AiRulesFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid technology catalog ({detail})")
