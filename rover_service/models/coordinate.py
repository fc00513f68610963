from pydantic import BaseModel, ConfigDict, Field


# Half-width of the spherical mercator plane (EPSG:3857).
MAX_EXTENT = 20037508.342789244


class Coordinate(BaseModel):
    """Projected spherical mercator coordinate."""

    model_config = ConfigDict(frozen=True)

    x: float = Field(default=0.0, description="Longitude-like projected value.")
    y: float = Field(default=0.0, description="Latitude-like projected value.")

    def offset(self, dx: float, dy: float) -> "Coordinate":
        return Coordinate(x=self.x + dx, y=self.y + dy)
