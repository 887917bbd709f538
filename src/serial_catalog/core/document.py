"""Typed tree mirroring the catalog XML schema."""

from pydantic import BaseModel, ConfigDict, Field


class _Node(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class TypedText(_Node):
    """Text carrying a ``type`` attribute (titles, descriptions, slogans)."""

    text: str = ""
    type: str = ""


class Award(_Node):
    """Award attached to a credit."""

    text: str = ""
    type: str = ""
    year: str = ""


class Credit(_Node):
    """Credit entry of a series, e.g. a studio or a director."""

    text: str = ""
    role: str = ""
    awards: list[Award] = Field(default_factory=list)


class Quote(_Node):
    """Quote with its author."""

    text: str = ""
    author: str = ""


class StudioRestrictions(_Node):
    """Restrictions placed by the rights holder."""

    episodes_allowed: str = ""


class SeriesMetaInfo(_Node):
    """The ``meta-info`` block of a series group."""

    titles: list[TypedText] = Field(default_factory=list)
    description: TypedText = Field(default_factory=TypedText)
    restriction: str = ""
    category: str = ""
    year: str = ""
    location: str = ""
    available: str = ""
    featured: str = ""
    priority: str = ""
    imdb_id: str = ""
    external_allowed: str = ""
    credits: list[Credit] = Field(default_factory=list)
    kinopoisk_id: str = ""
    quote: Quote = Field(default_factory=Quote)
    slogan: TypedText = Field(default_factory=TypedText)
    studio_restrictions: StudioRestrictions = Field(
        default_factory=StudioRestrictions
    )


class SeasonAvailability(_Node):
    """Availability marker of a season."""

    text: str = ""
    start: str = ""


class SeasonMetaInfo(_Node):
    """The ``meta-info`` block of a season group."""

    title: TypedText = Field(default_factory=TypedText)
    available: SeasonAvailability = Field(default_factory=SeasonAvailability)
    year: str = ""
    description: TypedText = Field(default_factory=TypedText)


class VideoAvailability(_Node):
    """Availability window of an episode."""

    text: str = ""
    start: str = ""
    end: str = ""


class VideoMetaInfo(_Node):
    """The ``meta-info`` block of a video."""

    titles: list[TypedText] = Field(default_factory=list)
    available: VideoAvailability = Field(default_factory=VideoAvailability)
    duration: str = ""
    featured: str = ""


class MediaRef(_Node):
    """Element pointing at a side asset such as a logo or subtitles."""

    text: str = ""
    src: str = ""


class Video(_Node):
    """A ``video`` element, i.e. one episode."""

    end: str = ""
    endtitles: str = ""
    episodesinopsys: str = ""
    guid: str = ""
    multilang: str = ""
    number: str = ""
    src: str = ""
    start: str = ""
    meta_info: VideoMetaInfo = Field(default_factory=VideoMetaInfo)
    logo: MediaRef = Field(default_factory=MediaRef)
    subtitles: MediaRef = Field(default_factory=MediaRef)


class SeasonGroup(_Node):
    """A season ``group`` nested in a series group."""

    number: str = ""
    type: str = ""
    meta_info: SeasonMetaInfo = Field(default_factory=SeasonMetaInfo)
    videos: list[Video] = Field(default_factory=list)


class SeriesGroup(_Node):
    """A series ``group`` directly under the document root."""

    guid: str = ""
    type: str = ""
    meta_info: SeriesMetaInfo = Field(default_factory=SeriesMetaInfo)
    seasons: list[SeasonGroup] = Field(default_factory=list)


class CatalogDocument(_Node):
    """The whole ``video-data`` document."""

    title: str = ""
    series: list[SeriesGroup] = Field(default_factory=list)
