"""ccswitch - switch Claude Code between API profiles.

Philosophy:
- Ruthless simplicity
- Profiles are read-only; only settings.json is written
- Unknown settings fields are never dropped
- Fail fast with helpful guidance

ccswitch keeps named sets of environment variables (endpoint, model,
credentials) in ~/.ccswitch/ccs.json and projects the chosen set into
Claude Code's settings.json.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
