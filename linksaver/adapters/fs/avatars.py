from pathlib import Path


class AvatarDirectory:
    """Application-private avatar directory, created on first save."""

    def __init__(self, base_path: str):
        self.base_path = Path(base_path).resolve()

    def _safe_path(self, name: str) -> Path:
        # Prevent traversal
        target = (self.base_path / name).resolve()
        if target.parent != self.base_path:
            raise ValueError(f"Path traversal attempt detected: {name}")
        return target

    def save(self, name: str, data: bytes) -> str:
        """Save bytes under the file name and return the absolute path."""
        target = self._safe_path(name)
        self.base_path.mkdir(parents=True, exist_ok=True)
        # Same name overwrites the previous capture
        with open(target, "wb") as f:
            f.write(data)
        return str(target)
