"""SkillFrame: competency framework interchange and level migrations."""

__version__ = "0.1.0"
