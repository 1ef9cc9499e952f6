"""Post models for search results."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PostRecord(BaseModel):
    """One post matched by a search, as handed over by the search provider."""

    model_config = ConfigDict(extra="allow", frozen=True)

    title: str
    url: str
    excerpt: str = ""

    # Raw publish timestamp, in whatever form the provider sends it
    date: Any | None = None


class DisplayPost(PostRecord):
    """Post record with its derived display date."""

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    post_date: str | None = Field(
        default=None,
        alias="postDate",
        description="Formatted publish date, None when the post has no usable date",
    )

    @classmethod
    def from_record(cls, record: PostRecord, post_date: str | None) -> "DisplayPost":
        """Copy every field of a record and attach its display date.

        Args:
            record: Source post record
            post_date: Formatted date for the record

        Returns:
            DisplayPost carrying the record's fields
        """
        fields = record.model_dump()
        fields.pop("post_date", None)
        fields["postDate"] = post_date
        return cls.model_validate(fields)

    def to_template_data(self) -> dict[str, Any]:
        """Get the template context for this post.

        ``postDate`` is left out when absent so the template section keyed on
        it is skipped.
        """
        data = self.model_dump(by_alias=True)
        if self.post_date is None:
            data.pop("postDate", None)
        return data
