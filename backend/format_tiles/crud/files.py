from __future__ import annotations

from sqlalchemy.orm import Session

from format_tiles.models.stored_file import StoredFile


def get_area_files(db: Session, context_id: int, component: str, filearea: str) -> list[StoredFile]:
    return (
        db.query(StoredFile)
        .filter(
            StoredFile.context_id == context_id,
            StoredFile.component == component,
            StoredFile.filearea == filearea,
        )
        .order_by(
            StoredFile.itemid.asc(),
            StoredFile.filepath.asc(),
            StoredFile.filename.asc(),
            StoredFile.id.asc(),
        )
        .all()
    )
