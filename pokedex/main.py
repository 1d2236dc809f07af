from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Query, status

from pokedex.config import Settings, configure_logging, get_settings
from pokedex.dependencies import close_clients, get_pokemon_service
from pokedex.models import PokemonDetail, PokemonListResponse, SearchResponse
from pokedex.services import PokemonService


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(get_settings().log_level)
    yield
    await close_clients()


app = FastAPI(
    title="Pokedex Catalog API",
    description="Read-only Pokemon catalog over PokeAPI.",
    lifespan=lifespan,
)


# Endpoint 1: Paginated listing
@app.get("/", response_model=PokemonListResponse, summary="Lists Pokemon, one page at a time")
@app.get("/pokemon", response_model=PokemonListResponse, summary="Lists Pokemon, one page at a time")
async def list_pokemon(
    page: int = 1,
    service: PokemonService = Depends(get_pokemon_service),
    settings: Settings = Depends(get_settings),
):
    page = max(1, page)
    limit = settings.page_size
    items = await service.list_pokemon(limit=limit, offset=(page - 1) * limit)
    return PokemonListResponse(items=items, page=page, has_more=len(items) == limit)


# Endpoint 3: Search (declared before the detail route so "search" is not taken as an identifier)
@app.get("/pokemon/search", response_model=SearchResponse, summary="Finds a Pokemon by exact id or name")
async def search_pokemon(
    query: str = Query(min_length=1, max_length=100),
    service: PokemonService = Depends(get_pokemon_service),
):
    results = await service.search_pokemon(query)
    return SearchResponse(query=query, results=results)


# Endpoint 2: Detail by id or name
@app.get("/pokemon/{identifier}", response_model=PokemonDetail, summary="Returns one Pokemon's details")
async def get_pokemon(
    identifier: str,
    service: PokemonService = Depends(get_pokemon_service),
):
    """Numeric identifiers are looked up as ids first, then as names."""
    detail = await service.get_pokemon(identifier)
    if detail is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pokemon not found")
    return detail
