"""Compare view URLs."""

from urllib.parse import quote

from reference_filter.collaborators import UrlBuilder
from reference_filter.models import Project


class CompareUrlBuilder(UrlBuilder):
    """Builds '<base>/<namespace>/<project>/compare/<from>...<to>' URLs."""

    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")

    def compare_path(self, project: Project, from_ref: str, to_ref: str) -> str:
        return (
            f"/{project.path_with_namespace}/compare/"
            f"{quote(from_ref, safe='^')}...{quote(to_ref, safe='^')}"
        )

    def build_compare_url(
        self,
        source: Project,
        target: Project,
        from_ref: str,
        to_ref: str,
        only_path: bool = False,
    ) -> str:
        path = self.compare_path(target, from_ref, to_ref)
        if only_path:
            return path
        return f"{self.base_url}{path}"
