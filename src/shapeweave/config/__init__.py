"""Configuration models and loaders.

Import from the submodules directly (``shapeweave.config.loader``,
``shapeweave.config.schema``); this package stays import-light because the
description models depend on :mod:`shapeweave.config.ranges`.
"""
