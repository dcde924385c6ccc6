"""Wiki page reference data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WikiReference:
    """Identifiers of one ONES wiki page, parsed from its browser URL.

    Attributes:
        host: ONES host name (e.g., "ones.example.com")
        team_id: Team UUID the page belongs to
        space_id: Wiki space UUID (not needed by the content API)
        page_id: Page UUID
    """
    host: str
    team_id: str
    space_id: str
    page_id: str

    @property
    def primary_content_url(self) -> str:
        """URL of the published page content endpoint."""
        return (
            f"https://{self.host}/wiki/api/wiki/team/{self.team_id}"
            f"/online_page/{self.page_id}/content"
        )

    @property
    def alternative_content_url(self) -> str:
        """URL of the page detail endpoint, used when the primary one fails."""
        return (
            f"https://{self.host}/wiki/api/wiki/team/{self.team_id}"
            f"/page/{self.page_id}"
        )

    @property
    def referer(self) -> str:
        """Referer header value expected by the wiki API."""
        return f"https://{self.host}/wiki/"
