from pydantic import BaseModel, ConfigDict
from typing import Optional


class Summary(BaseModel):
    """Link preview record, shaped like the Open Graph tags it stands in for."""
    title: str
    description: str
    canonical: str
    image: str
    type: str

    # Site-level decoration, filled in by the dispatcher
    lang: Optional[str] = None
    icon: Optional[str] = None
    site_name: Optional[str] = None


# Path arguments bound to fetchers. Positional segments extracted from a
# matched path map onto fields in declaration order.

class PathParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_args(cls, args):
        names = list(cls.model_fields)
        if len(args) != len(names):
            raise ValueError(
                f"{cls.__name__} expects {len(names)} path arguments, got {len(args)}"
            )
        return cls(**dict(zip(names, args)))


class RootParams(PathParams):
    pass


class RepositoryParams(PathParams):
    owner: str
    repo: str


class TagParams(RepositoryParams):
    tag: str


class CommitParams(RepositoryParams):
    sha: str


class SubsectionParams(RepositoryParams):
    section: str
