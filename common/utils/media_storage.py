"""
Local media storage
업로드된 영상/썸네일 파일을 UPLOAD_FOLDER 에 저장하고 접근 URL 을 만든다.
"""

import json
import subprocess
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from werkzeug.utils import secure_filename

from common.utils.logging_utils import get_logger

logger = get_logger('media_storage')

CHUNK_SIZE = 1024 * 1024  # 1 MB


@dataclass
class MediaAsset:
    url: str
    storage_id: str
    duration: Optional[float] = None

    def to_document(self):
        return {
            'url': self.url,
            'storage_id': self.storage_id
        }


def probe_duration(path: Path) -> Optional[float]:
    """ffprobe 로 미디어 길이(초)를 구한다. 실패하면 None."""
    cmd = [
        "ffprobe",
        "-v", "error",
        "-show_entries", "format=duration",
        "-of", "json",
        str(path),
    ]
    try:
        completed = subprocess.run(cmd, check=True, capture_output=True, timeout=60)
        duration = json.loads(completed.stdout or b'{}').get('format', {}).get('duration')
        return round(float(duration), 2) if duration is not None else None
    except subprocess.CalledProcessError as e:
        logger.warning(f"ffprobe failed for {path}: {e.stderr and e.stderr.decode() or e}")
        return None
    except subprocess.TimeoutExpired:
        logger.warning(f"ffprobe timed out for {path}")
        return None
    except FileNotFoundError:
        logger.warning("ffprobe not found; video duration will not be recorded")
        return None
    except ValueError:
        logger.warning(f"ffprobe returned unreadable duration for {path}")
        return None


class MediaStorage:

    def __init__(self, upload_dir, url_prefix='/media', probe_media_duration=True):
        self.upload_dir = Path(upload_dir)
        self.url_prefix = url_prefix.rstrip('/')
        self.probe_media_duration = probe_media_duration

    def path_for(self, storage_id: str) -> Path:
        return self.upload_dir / storage_id

    def upload(self, file_storage, probe_duration_of_media: bool = False) -> Optional[MediaAsset]:
        """
        werkzeug FileStorage 를 저장한다. 저장에 실패하면 None (media unavailable).
        """
        if file_storage is None or not file_storage.filename:
            return None

        ext = Path(secure_filename(file_storage.filename)).suffix.lower()
        if len(ext) > 10:
            ext = ''
        storage_id = f"{uuid.uuid4().hex}{ext}"
        path = self.path_for(storage_id)

        try:
            self.upload_dir.mkdir(parents=True, exist_ok=True)
            with path.open('wb') as f:
                while chunk := file_storage.stream.read(CHUNK_SIZE):
                    f.write(chunk)
        except OSError as e:
            logger.error(f"Failed to store media {file_storage.filename}: {e}")
            if path.exists():
                path.unlink()
            return None

        duration = None
        if probe_duration_of_media and self.probe_media_duration:
            duration = probe_duration(path)

        logger.info(f"Stored media {storage_id} ({file_storage.filename})")

        return MediaAsset(
            url=f"{self.url_prefix}/{storage_id}",
            storage_id=storage_id,
            duration=duration
        )

    def delete(self, storage_id: Optional[str]) -> bool:
        if not storage_id:
            return False

        path = self.path_for(secure_filename(storage_id))
        try:
            path.unlink()
            logger.info(f"Deleted media {storage_id}")
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning(f"Failed to delete media {storage_id}: {e}")
            return False
