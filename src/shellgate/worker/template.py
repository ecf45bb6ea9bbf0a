"""Generated worker entry point: a plain Python string for ``build_worker_code``.

No template engine here. ``str.format()`` fills ``{marker}``,
``{upstream_import}``, ``{routes_data}``, ``{fallback_code}`` and
``{hidden}``; literal braces in the template are doubled.

Sibling modules are loaded by file path: the bundle directory is named
``_worker.py`` and is not importable as a package.
"""

WORKER_INDEX_PY = '''\
{marker}
# Regenerated on each build. Edits here are overwritten.

import importlib.util
import inspect
from pathlib import Path

from shellgate.assets import DirectoryAssets, Env
from shellgate.edge import EdgeRouter

_HERE = Path(__file__).resolve().parent


def _load_sibling(filename):
    path = _HERE / filename
    spec = importlib.util.spec_from_file_location("_worker_" + path.stem, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


_escape = _load_sibling("escape.py")
{upstream_import}

DYNAMIC_ROUTES = {routes_data}


async def fallback(request, env, ctx):
{fallback_code}


router = EdgeRouter(DYNAMIC_ROUTES, fallback=fallback, escape=_escape.escape_html)
fetch = router.fetch
app = router.asgi(Env(assets=DirectoryAssets(_HERE.parent, hidden={hidden!r})))
'''
