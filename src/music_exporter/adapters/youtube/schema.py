"""Minimal Pydantic models for the YouTube Data API v3.

See https://developers.google.com/youtube/v3/docs/playlistItems#resource
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class YoutubeBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class RelatedPlaylists(YoutubeBaseModel):
    likes: str


class ChannelContentDetails(YoutubeBaseModel):
    related_playlists: RelatedPlaylists = Field(alias="relatedPlaylists")


class Channel(YoutubeBaseModel):
    content_details: ChannelContentDetails = Field(alias="contentDetails")


class ChannelsResponse(YoutubeBaseModel):
    items: list[Channel] = Field(default_factory=list["Channel"])


class ResourceId(YoutubeBaseModel):
    video_id: str = Field(alias="videoId")


class PlaylistItemSnippet(YoutubeBaseModel):
    title: str
    published_at: str | None = Field(default=None, alias="publishedAt")
    video_owner_channel_title: str | None = Field(default=None, alias="videoOwnerChannelTitle")
    resource_id: ResourceId = Field(alias="resourceId")


class PlaylistItem(YoutubeBaseModel):
    snippet: PlaylistItemSnippet


class PlaylistItemsPage(YoutubeBaseModel):
    next_page_token: str | None = Field(default=None, alias="nextPageToken")
    items: list[PlaylistItem] = Field(default_factory=list["PlaylistItem"])
