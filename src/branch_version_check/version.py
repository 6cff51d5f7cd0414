from importlib import metadata

version = metadata.version('branch-version-check')
