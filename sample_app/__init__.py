"""Sample demo workload for container-orchestration pipelines.

The ASGI app is built by :func:`sample_app.api.create_app`; importing the
package reads no configuration.
"""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("sample-app")
except PackageNotFoundError:  # pragma: no cover - source checkout without metadata
    __version__ = "1.0.0"

__all__ = ["__version__"]
