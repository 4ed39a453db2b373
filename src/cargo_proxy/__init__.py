"""cargo-proxy: set, show and clear Cargo registry mirrors.

Edits Cargo's config.toml in place with tomlkit so that everything outside
the keys this tool owns keeps its original formatting.
"""

__version__ = "0.1.0"
