import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from boggle_engine.errors import InvalidInput, NotReady
from boggle_engine.lexicon import Lexicon
from boggle_engine.settings import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("boggle")


async def _read_json(request: Request) -> dict:
    try:
        body = await request.json()
    except ValueError as e:
        raise InvalidInput(f"request body is not valid JSON: {e}") from e
    if not isinstance(body, dict):
        raise InvalidInput("request body must be a JSON object")
    return body


def _min_length(body: dict) -> int:
    value = body.get("min_length", settings.MIN_WORD_LENGTH)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"min_length must be an integer, got {value!r}")
    return value


def _string_list(body: dict, key: str) -> list[str]:
    value = body.get(key)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise InvalidInput(f"'{key}' must be a list of strings")
    return value


def create_app(lexicon: Lexicon | None = None) -> FastAPI:
    from contextlib import asynccontextmanager

    state = {"lexicon": lexicon if lexicon is not None else Lexicon()}

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        if lexicon is None:
            from boggle_engine.lexicon import load_lexicon
            dict_path = settings.DICTIONARY_PATH
            logger.info("Loading dictionary from %s", dict_path)
            try:
                state["lexicon"] = load_lexicon(dict_path)
            except InvalidInput as e:
                logger.warning("Dictionary not loaded, word queries disabled: %s", e)
        yield

    application = FastAPI(title="Boggle Engine", lifespan=lifespan)

    @application.exception_handler(InvalidInput)
    async def invalid_input_handler(request: Request, exc: InvalidInput):
        return JSONResponse({"detail": str(exc)}, status_code=400)

    @application.exception_handler(NotReady)
    async def not_ready_handler(request: Request, exc: NotReady):
        return JSONResponse({"detail": str(exc)}, status_code=503)

    @application.get("/health")
    async def health():
        return {"status": "ok", "lexicon_loaded": state["lexicon"].is_loaded}

    @application.post("/solve")
    async def solve(request: Request):
        from boggle_engine.board import Board
        from boggle_engine.metrics import StageTimer
        from boggle_engine.scoring import score_words
        from boggle_engine.solver import find_all_words

        body = await _read_json(request)
        min_length = _min_length(body)
        timer = StageTimer()

        with timer.stage("board"):
            board = Board.from_flat_array(_string_list(body, "tiles"))

        with timer.stage("solve"):
            all_words = find_all_words(board, state["lexicon"], min_length, prune=settings.PRUNE)
            timer.count("solve", len(all_words))

        with timer.stage("score"):
            score = score_words(all_words, min_length, state["lexicon"])

        words = all_words[:settings.MAX_RESULTS] if settings.MAX_RESULTS > 0 else all_words
        logger.info("Board %dx%d: found %d words (returning %d), score %d",
                    board.size(), board.size(), len(all_words), len(words), score)

        return JSONResponse({
            "grid_size": board.size(),
            "board": list(board.tiles),
            "rendered": board.render(),
            "words": words,
            "word_count": len(all_words),
            "score": score,
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
            "stage_counts": timer.counts,
        })

    @application.post("/locate")
    async def locate(request: Request):
        from boggle_engine.board import Board
        from boggle_engine.solver import locate_word

        body = await _read_json(request)
        word = body.get("word")
        if not isinstance(word, str):
            raise InvalidInput("'word' must be a string")
        board = Board.from_flat_array(_string_list(body, "tiles"))
        path = locate_word(board, word)
        return {"word": word, "path": path, "found": bool(path)}

    @application.post("/score")
    async def score(request: Request):
        from boggle_engine.scoring import score_words

        body = await _read_json(request)
        words = {w.lower() for w in _string_list(body, "words")}
        total = score_words(words, _min_length(body), state["lexicon"])
        return {"score": total}

    @application.get("/validate")
    async def validate(word: str | None = None, prefix: str | None = None):
        current = state["lexicon"]
        if word is not None:
            return {"word": word, "valid": current.contains(word.lower())}
        if prefix is not None:
            return {"prefix": prefix, "valid": current.has_word_with_prefix(prefix.lower())}
        raise InvalidInput("pass either 'word' or 'prefix'")

    @application.get("/api/settings")
    async def api_get_settings():
        from boggle_engine.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from boggle_engine.settings import update_settings, get_editable_settings
        body = await _read_json(request)
        errors = update_settings(settings, **body)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()
