"""Rendering pipeline: styled line buffers, viewports, and panel renderers.

Submodules are imported directly (``dirman.render.viewport`` etc.) so theme
and renderer modules can depend on ``styled`` without import cycles.
"""
