import yaml
import os
import logging
from pydantic import BaseModel, Field

from talent_match.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class MatchWeights(BaseModel):
    """Weights for each sub-score in the composite score (must sum to 1.0)."""
    skills: float = 0.45
    experience: float = 0.25
    location: float = 0.15
    education: float = 0.10
    salary: float = 0.05


class PenaltyGate(BaseModel):
    """Multiply the weighted score when a sub-score falls below threshold."""
    threshold: float
    multiplier: float


class PenaltyGates(BaseModel):
    """
    Critical-threshold penalties, evaluated top to bottom; only the first
    gate that fires is applied.
    """
    skills: PenaltyGate = PenaltyGate(threshold=60, multiplier=0.70)
    experience: PenaltyGate = PenaltyGate(threshold=40, multiplier=0.80)
    # Only applies when the job is not remote/hybrid
    location: PenaltyGate = PenaltyGate(threshold=50, multiplier=0.90)


class FitThresholds(BaseModel):
    """Minimum overall score for each fit tier; anything lower is 'poor'."""
    excellent: int = 85
    good: int = 70
    average: int = 55


class SkillMatchConfig(BaseModel):
    similarity_threshold: float = 0.6  # Minimum string similarity for a fuzzy match
    technology_bonus: int = 30  # Flat points per declared technology the candidate lists
    empty_requirements_score: int = 0  # Skill score when the job lists no required skills


class ResultPolicy(BaseModel):
    """Batch filtering and truncation policy.

    Applied after scoring, before results are returned.
    """
    min_score: int = 0  # 0-100, filter threshold
    max_results: int = 50  # Maximum results to return


class EngineConfig(BaseModel):
    """
    Configuration for the MatchEngine.
    """
    weights: MatchWeights = Field(default_factory=MatchWeights)
    penalties: PenaltyGates = Field(default_factory=PenaltyGates)
    fit_thresholds: FitThresholds = Field(default_factory=FitThresholds)
    skills: SkillMatchConfig = Field(default_factory=SkillMatchConfig)
    result_policy: ResultPolicy = Field(default_factory=ResultPolicy)

    default_country: str = "India"  # Country assumed for unresolved locations
    max_workers: int = 1  # >1 scores candidates on a thread pool


class AppConfig(BaseModel):
    engine: EngineConfig = Field(default_factory=EngineConfig)
    log_level: str = "INFO"


def validate_engine_config(config: EngineConfig) -> EngineConfig:
    """Reject configurations the scorer cannot honour."""
    weights = config.weights.model_dump()
    if any(w < 0 for w in weights.values()):
        raise ConfigurationError(f"Weights must be non-negative: {weights}")
    total = sum(weights.values())
    if abs(total - 1.0) > 1e-6:
        raise ConfigurationError(f"Weights must sum to 1.0, got {total:.4f}")

    for name, gate in config.penalties.model_dump().items():
        if gate['threshold'] < 0:
            raise ConfigurationError(f"Penalty threshold for {name} must be non-negative")
        if not 0.0 <= gate['multiplier'] <= 1.0:
            raise ConfigurationError(f"Penalty multiplier for {name} must be within [0, 1]")

    fit = config.fit_thresholds
    if not (100 >= fit.excellent >= fit.good >= fit.average >= 0):
        raise ConfigurationError(
            f"Fit thresholds must be descending within [0, 100]: {fit.model_dump()}"
        )

    if not 0.0 <= config.skills.similarity_threshold <= 1.0:
        raise ConfigurationError("skills.similarity_threshold must be within [0, 1]")

    policy = config.result_policy
    if policy.max_results < 0:
        raise ConfigurationError("result_policy.max_results must be >= 0")

    if config.max_workers < 1:
        raise ConfigurationError("max_workers must be >= 1")

    return config


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from another directory), try the repo root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.warning(f"No config file found at {config_path}, using defaults")

    engine = data.setdefault('engine', {}) or {}
    data['engine'] = engine

    # Allow env var overrides for the result policy
    env_min_score = os.environ.get("MATCH_MIN_SCORE")
    if env_min_score:
        engine.setdefault('result_policy', {})['min_score'] = int(env_min_score)

    env_max_results = os.environ.get("MATCH_MAX_RESULTS")
    if env_max_results:
        engine.setdefault('result_policy', {})['max_results'] = int(env_max_results)

    # Allow env var override for worker count
    env_max_workers = os.environ.get("MATCH_MAX_WORKERS")
    if env_max_workers:
        engine['max_workers'] = int(env_max_workers)

    env_log_level = os.environ.get("LOG_LEVEL")
    if env_log_level:
        data['log_level'] = env_log_level

    config = AppConfig(**data)
    validate_engine_config(config.engine)
    return config
