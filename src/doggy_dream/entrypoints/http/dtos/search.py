from pydantic import BaseModel, ConfigDict, Field


class SearchQueryDTO(BaseModel):
    """Query parameters for searching dogs, after breed notations are merged."""

    sort: str | None = Field(
        default=None,
        description="Sort specifier `field:direction` (breed, name or age; asc or desc)",
        examples=["breed:asc"],
    )
    size: int = Field(
        default=20,
        description="Number of dogs per page",
        examples=[20],
        ge=1,
        le=100,
    )
    offset: int = Field(
        default=0,
        description="Number of results to skip (query parameter `from`)",
        examples=[0],
        ge=0,
    )
    breeds: list[str] = Field(
        default_factory=list,
        description="Breed filters from `breeds=` and `breeds[N]=` parameters (case-insensitive)",
        examples=[["Beagle", "cairn terrier"]],
    )


class DogResponseDTO(BaseModel):
    id: str
    img: str
    name: str
    age: int
    breed: str
    zip_code: str


class PaginationDTO(BaseModel):
    total: int
    next: str | None = Field(default=None, description="Path of the next page; absent on the last page")
    prev: str | None = Field(default=None, description="Path of the previous page; absent on the first page")
    first_position: int = Field(description="1-based position of the first dog shown (0 when empty)")
    last_position: int = Field(description="1-based position of the last dog shown (0 when empty)")


class SearchParamsDTO(BaseModel):
    """Request parameters echoed back so controls can be pre-populated."""

    model_config = ConfigDict(populate_by_name=True)

    sort: str
    size: int
    offset: int = Field(alias="from")
    selected_breeds: list[str]


class SearchResponseDTO(BaseModel):
    breeds: list[str]
    applied_breeds: list[str]
    search: PaginationDTO
    dogs: list[DogResponseDTO]
    params: SearchParamsDTO

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "breeds": ["Beagle", "Cairn Terrier"],
                "applied_breeds": ["Beagle"],
                "search": {
                    "total": 45,
                    "next": "/search?size=20&from=20&breeds=Beagle",
                    "first_position": 1,
                    "last_position": 20,
                },
                "dogs": [
                    {
                        "id": "VXGFTIcBOvEgQ5OCx40W",
                        "img": "https://frontend-take-home.fetch.com/dog-images/n02088364-beagle/n02088364_10108.jpg",
                        "name": "Emory",
                        "age": 10,
                        "breed": "Beagle",
                        "zip_code": "48333",
                    }
                ],
                "params": {
                    "sort": "breed:asc",
                    "size": 20,
                    "from": 0,
                    "selected_breeds": ["beagle"],
                },
            }
        }
    )
