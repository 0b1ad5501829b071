"""Core business logic layer.

Subpackages:
- prompt: building the coaching prompt from a profile
- sections: splitting model output into plan sections
- controller: form state and the generate/reset flow
- reporting: rendering plan sections for display
"""
__all__ = ["prompt", "sections", "controller", "reporting"]
