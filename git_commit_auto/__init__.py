"""
Git Commit Auto

Generate a commit message for staged changes with Gemini and commit it.
"""

__version__ = "1.0.0"

# Type tags the model is asked to lead with, in prompt order
COMMIT_TYPES = {
    'FEAT': 'A new feature or capability',
    'FIX': 'A bug fix',
    'REFACTOR': 'Code restructuring without behavior change',
    'DOCS': 'Documentation only changes',
    'STYLE': 'Formatting, whitespace, no code change',
    'TEST': 'Adding or updating tests',
    'CHORE': 'Maintenance tasks, dependencies, tooling',
}

COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())
