"""Build configuration.

BuildConfig is a frozen dataclass: immutable after creation, validated
once at construction so bad settings never reach the request path.
"""

from dataclasses import dataclass
from pathlib import Path

from shellgate.errors import ConfigurationError

BUILD_FORMATS = frozenset({"directory", "file"})


@dataclass(frozen=True, slots=True)
class BuildConfig:
    """Build and dev-server configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = BuildConfig(base="/docs", exclude_paths=("/api/*",))
    """

    # Project layout
    root: str | Path = "."
    pages_dir: str | Path = "src/pages"
    out_dir: str | Path = "dist"
    public_dir: str | Path | None = None  # Served by the dev server; defaults to out_dir

    # Routing
    base: str = "/"
    build_format: str = "directory"  # "directory" -> /users/x/index.html, "file" -> /users/x.html
    exclude_paths: tuple[str, ...] = ()  # Extra paths kept out of the worker in _routes.json

    # Page files
    page_suffixes: tuple[str, ...] = (".page", ".html", ".md", ".py")
    render_suffixes: tuple[str, ...] = (".page", ".html", ".md")  # Others are endpoints

    # Dev server
    host: str = "127.0.0.1"
    port: int = 4321

    def __post_init__(self) -> None:
        if not isinstance(self.exclude_paths, (list, tuple)) or not all(
            isinstance(p, str) for p in self.exclude_paths
        ):
            msg = "exclude_paths must be a list of strings"
            raise ConfigurationError(msg)
        # Normalise to a tuple so the frozen instance stays hashable
        object.__setattr__(self, "exclude_paths", tuple(self.exclude_paths))

        if self.build_format not in BUILD_FORMATS:
            allowed = ", ".join(sorted(BUILD_FORMATS))
            msg = f"build_format must be one of {allowed}, got {self.build_format!r}"
            raise ConfigurationError(msg)

        if not isinstance(self.base, str) or (self.base and not self.base.startswith("/")):
            msg = f"base must be an absolute URL path, got {self.base!r}"
            raise ConfigurationError(msg)

        unknown = set(self.render_suffixes) - set(self.page_suffixes)
        if unknown:
            msg = f"render_suffixes must be a subset of page_suffixes: {sorted(unknown)}"
            raise ConfigurationError(msg)

    @property
    def root_path(self) -> Path:
        return Path(self.root).resolve()

    @property
    def pages_path(self) -> Path:
        return self.root_path / self.pages_dir

    @property
    def out_path(self) -> Path:
        return self.root_path / self.out_dir

    @property
    def public_path(self) -> Path:
        """Directory the dev server serves shells and assets from."""
        if self.public_dir is None:
            return self.out_path
        return self.root_path / self.public_dir
