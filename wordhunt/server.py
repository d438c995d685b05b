import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from wordhunt.grid import CAPACITY, Grid
from wordhunt.settings import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("wordhunt")

# These will be populated at startup
_trie = None
_session = None


class LettersRequest(BaseModel):
    letters: str = Field(min_length=1)


class SolveRequest(BaseModel):
    letters: str | None = None


def _check_letters(letters: str):
    if not letters.isalpha() or len(letters.lower()) != len(letters):
        raise HTTPException(400, f"Letters must be single alphabetic characters, got: {letters!r}")


def _grid_state(grid: Grid) -> dict:
    return {"letters": grid.letters, "board": grid.rows(), "count": len(grid)}


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(application: FastAPI):
        global _trie, _session

        if settings.DEBUG:
            logger.setLevel(logging.DEBUG)

        from wordhunt.session import Session
        from wordhunt.trie import load_trie
        logger.info("Loading dictionary from %s", settings.DICTIONARY_PATH)
        # MIN_WORD_LENGTH is applied per search so it can change at runtime
        _trie = load_trie(str(settings.DICTIONARY_PATH), min_length=1)
        _session = Session(_trie, settings.MIN_WORD_LENGTH)

        yield

        _trie = None
        _session = None

    application = FastAPI(title="Word Hunt Solver", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {
            "status": "ok",
            "trie_loaded": _trie is not None,
            "word_count": len(_trie) if _trie is not None else 0,
        }

    @application.get("/grid")
    async def get_grid():
        return _grid_state(_session.grid)

    @application.post("/grid/letters")
    async def append_letters(body: LettersRequest):
        _check_letters(body.letters)
        with _session.lock:
            if len(_session.grid) + len(body.letters) > CAPACITY:
                raise HTTPException(
                    409, f"Grid holds {len(_session.grid)} letters, cannot add {len(body.letters)} more (max {CAPACITY})"
                )
            for ch in body.letters:
                _session.grid.append(ch)
        return _grid_state(_session.grid)

    @application.delete("/grid/letters")
    async def remove_letter():
        from wordhunt.session import BACKSPACE
        _session.handle_key(BACKSPACE)
        return _grid_state(_session.grid)

    @application.delete("/grid")
    async def clear_grid():
        with _session.lock:
            _session.grid.clear()
        return _grid_state(_session.grid)

    @application.post("/solve")
    async def solve(body: SolveRequest | None = None):
        from wordhunt.metrics import SolveMetrics
        from wordhunt.solver import solve as solve_board

        metrics = SolveMetrics()
        one_shot = body is not None and body.letters is not None

        with metrics.stage("board"):
            if one_shot:
                _check_letters(body.letters)
                if len(body.letters) > CAPACITY:
                    raise HTTPException(400, f"Board has {len(body.letters)} letters (max {CAPACITY})")
                grid = Grid.from_letters(body.letters)
            else:
                grid = _session.grid

        if one_shot:
            metrics.board = grid.letters
            with metrics.stage("search"):
                all_words, paths = solve_board(grid, _trie, settings.MIN_WORD_LENGTH)
            metrics.record_words(all_words)
            metrics.log()
        else:
            _session.min_length = settings.MIN_WORD_LENGTH
            all_words = _session.solve(metrics)
            paths = _session.paths

        words = all_words[:settings.MAX_RESULTS] if settings.MAX_RESULTS > 0 else all_words
        logger.info("Returning %d of %d words", len(words), len(all_words))

        return JSONResponse({
            "board": grid.rows(),
            "words": words,
            "word_count": len(all_words),
            "paths": {w: paths[w] for w in words},
            "processing_time": metrics.total_ms,
            "metrics": metrics.summary(),
        })

    @application.get("/api/settings")
    async def api_get_settings():
        from wordhunt.settings import EDITABLE_FIELDS, get_editable_settings
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from wordhunt.settings import get_editable_settings, update_settings
        body = await request.json()
        errors = update_settings(settings, **body)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()
