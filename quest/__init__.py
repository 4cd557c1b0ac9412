"""
Quest: adaptive micro-lesson engine.

Subpackages:
- curriculum: read-only course model and loader
- exercises: per-kind grading handlers
- study: session construction with review interleaving
- delivery: lesson progression, scoring, progress storage, CLI
"""

__version__ = "1.0.0"
