"""JSON output writer for wrapped profiles."""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

from github_wrapped.models.profile import UserProfile


def write_json_profile(
    profile: UserProfile,
    year: int,
    output_path: Optional[Path] = None,
) -> Path:
    """Write a wrapped profile to a JSON file.

    Args:
        profile: Profile to write
        year: Year the profile covers, used in the default filename
        output_path: Output file path (optional)

    Returns:
        Path to written file
    """
    if output_path is None:
        # Generate default path
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = Path("output") / f"{profile.username}_{year}_{timestamp}.json"

    # Ensure parent directory exists
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Write JSON with pretty formatting
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(profile.to_json_dict(), f, indent=2, ensure_ascii=False)

    return output_path
