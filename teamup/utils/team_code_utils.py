import secrets

from teamup.constants.team import TEAM_CODE_ALPHABET, TEAM_CODE_LENGTH


def generate_team_code() -> str:
    """
    Generate a random 6-character team code.

    Returns:
        A code made of digits and upper-case letters, e.g. "7QX2KD"
    """
    return "".join(secrets.choice(TEAM_CODE_ALPHABET) for _ in range(TEAM_CODE_LENGTH))


def normalize_team_code(team_code: str) -> str:
    return (team_code or "").strip().upper()
