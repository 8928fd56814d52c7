from pydantic import BaseModel, ConfigDict, Field, SecretStr


class Credentials(BaseModel):
    """Reddit app credentials used for the client-credentials grant."""

    model_config = ConfigDict(frozen=True)

    client_id: str = Field(..., min_length=1, description="Reddit app client id")
    client_secret: SecretStr = Field(..., description="Reddit app client secret")


class Post(BaseModel):
    """A single Reddit post as returned inside a listing child."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Post title")
    permalink: str = Field(
        ..., description="Path of the post on reddit.com (e.g. /r/x/comments/1/...)"
    )
    url: str | None = Field(None, description="Direct link to the post media, if any")


class AccessTokenResponse(BaseModel):
    access_token: str


class ListingChild(BaseModel):
    data: Post


class ListingData(BaseModel):
    children: list[ListingChild]


class Listing(BaseModel):
    """Envelope of a Reddit listing response (``{"data": {"children": [...]}}``)."""

    data: ListingData
