"""Milestone changelog components.

Provides:
- Settings loaded from the environment and `.env`
- Structured logging
- GitHub issue search for a milestone
- Label classification, markdown rendering and changelog file patching
"""
