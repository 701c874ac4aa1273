from dataclasses import dataclass


@dataclass(frozen=True)
class SearchHit:
    """One catalog row from a book search."""

    title: str
    author: str
    cover_image_url: str
    work_id: str

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "author": self.author,
            "coverImageUrl": self.cover_image_url,
            "workId": self.work_id,
        }
