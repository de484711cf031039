"""
Render artifacts on disk.

Every render keeps a copy of the submitted document under the data
directory and writes the video under the output directory, both named
<video id>_<timestamp> so repeated renders of one video never collide.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from composer.schema import VideoDefinition, to_dict


def timestamp_slug(now: Optional[datetime] = None) -> str:
    """UTC timestamp usable in file names, e.g. 2024-05-01T12-30-00."""
    now = now or datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H-%M-%S")


def artifact_name(video_id: str, stamp: str) -> str:
    safe_id = "".join(c if c.isalnum() or c in "-_" else "_" for c in video_id) or "video"
    return f"{safe_id}_{stamp}"


def save_document(video: VideoDefinition, data_dir: Union[str, Path], stamp: str) -> Path:
    """Write the normalized document to <data_dir>/<id>_<stamp>.json."""
    path = Path(data_dir) / f"{artifact_name(video.meta.id, stamp)}.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(to_dict(video), f, indent=2, ensure_ascii=False)
    return path


def default_output_path(video_id: str, output_dir: Union[str, Path], stamp: str) -> Path:
    return Path(output_dir) / f"{artifact_name(video_id, stamp)}.mp4"
