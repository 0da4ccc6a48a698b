import hmac
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Header, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, field_validator

from strategy_lens.analysis_models import MetricType
from strategy_lens.config import Config
from strategy_lens.logger import configure_logging, logger
from strategy_lens.metric_analysis import get_metric_analysis
from strategy_lens.profile import analyze_strategy_profile
from strategy_lens.report import build_strategy_report

WIN_RATE_RANGE_ERROR = "winRate must be a percentage between 0 and 100"


# --- LIFECYCLE ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(json_logs=Config.LOG_JSON, level=Config.LOG_LEVEL)
    # Fail-fast on bad settings
    Config.validate()

    logger.info("server_started", host=Config.API_HOST, port=Config.API_PORT)
    yield
    logger.info("server_stopped")


app = FastAPI(title="Strategy Lens", lifespan=lifespan)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # The rejected input may be inf/nan, which JSON cannot carry
    errors = [
        {k: v for k, v in err.items() if k not in ("input", "ctx")}
        for err in exc.errors()
    ]
    logger.warning("request_rejected", path=request.url.path, errors=len(errors))
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(errors)})


def win_rate_in_range(v: float) -> bool:
    # percent scale, 0-100
    return 0 <= v <= 100


# --- REQUEST CONTRACT ---
class MetricValue(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    value: float


class ProfilePayload(BaseModel):
    """Metric names follow the UI (camelCase); snake_case is accepted too."""
    model_config = ConfigDict(allow_inf_nan=False, populate_by_name=True)

    win_rate: float = Field(alias="winRate")
    profit_factor: float = Field(alias="profitFactor")
    sharpe_ratio: float = Field(alias="sharpeRatio")
    max_drawdown: float = Field(alias="maxDrawdown")
    avg_trade_duration: float = Field(alias="avgTradeDuration")

    @field_validator("win_rate")
    @classmethod
    def win_rate_in_percent(cls, v):
        if not win_rate_in_range(v):
            raise ValueError(WIN_RATE_RANGE_ERROR)
        return v


class ReportPayload(ProfilePayload):
    kelly_percent: Optional[float] = Field(default=None, alias="kellyPercent")


# --- AUTH ---
def require_api_key(x_api_key: Optional[str] = Header(None, alias="X-API-KEY")):
    if not Config.API_KEY:
        return
    # Constant time compare
    if not x_api_key or not hmac.compare_digest(x_api_key, Config.API_KEY):
        logger.warning("auth_failed")
        raise HTTPException(status_code=401, detail="Invalid API key")


# --- ENDPOINTS ---
@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/analyze/profile", dependencies=[Depends(require_api_key)])
async def analyze_profile(payload: ProfilePayload):
    return analyze_strategy_profile(payload.model_dump()).to_dict()


@app.post("/analyze/report", dependencies=[Depends(require_api_key)])
async def analyze_report(payload: ReportPayload):
    return build_strategy_report(payload.model_dump()).to_dict()


@app.post("/analyze/{metric_type}", dependencies=[Depends(require_api_key)])
async def analyze_metric(metric_type: str, payload: MetricValue):
    metric = MetricType.parse(metric_type)
    if metric is MetricType.WIN_RATE and not win_rate_in_range(payload.value):
        raise HTTPException(status_code=422, detail=WIN_RATE_RANGE_ERROR)
    # Unknown metric types get the neutral card, not a 404
    return get_metric_analysis(metric_type, payload.value).to_dict()
