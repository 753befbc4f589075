"""Operational CLI for the SpecGen application package.

Commands delegate to the package's npm scripts; the helpers around them keep
component manifests in step with the root manifest and render the pm2
process-manager config.

``specgen-app`` expects this package directory to sit inside the npm package
it drives, next to that package's ``package.json`` (for example a checkout
installed with ``pip install -e .``, or ``specgen_cli/`` shipped inside
``node_modules/@gv-sh/specgen-app/``). Installed on its own into
site-packages there is no ``package.json`` above it, and every command other
than the usage listing fails with a package-root error.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
