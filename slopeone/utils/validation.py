from typing import Optional
from pydantic import BaseModel, Field, model_validator, ConfigDict

from slopeone.utils.enums import BaselineStrategy


class BaseValidator(BaseModel):
    """Base validator shared by every configuration section."""
    model_config = ConfigDict(arbitrary_types_allowed=True)


# Dataset loading configuration

class DataLoadingConfig(BaseValidator):
    """Dataset loading configuration.

    Attributes:
        dataset_path (str): Path to the rating corpus used for training.
        test_path (Optional[str]): Path to the (user, item) pairs to predict; when missing
            every unrated item is scored for every user.
        header (bool): Whether the file(s) include(s) a header row; default is False.
        sep (str): Column separator; default is tab.
    """

    dataset_path: str
    test_path: Optional[str] = Field(default=None)
    header: bool = Field(default=False)
    sep: str = Field(default="\t")


# Rating domain configuration

class DomainConfig(BaseValidator):
    """Rating domain configuration.

    Attributes:
        minimum (float): Lowest valid rating; default is 1.
        maximum (float): Highest valid rating; default is 5.
        precision (Optional[float]): Rating step, informational only.
    """

    minimum: float = Field(default=1.0)
    maximum: float = Field(default=5.0)
    precision: Optional[float] = Field(default=None, gt=0)

    @model_validator(mode="after")
    def validate_bounds(self) -> "DomainConfig":
        """Ensure the interval is not empty.

        Returns:
            DomainConfig: The object itself.
        """
        if self.minimum > self.maximum:
            raise ValueError(f"Attribute `minimum` ({self.minimum}) must not exceed "
                             f"`maximum` ({self.maximum}).")
        return self


# Baseline configuration

class BaselineConfig(BaseValidator):
    """Baseline predictor configuration.

    Attributes:
        strategy (BaselineStrategy): Baseline used for items Slope One cannot predict.
        value (Optional[float]): Constant score, required with `constant` strategy.
        damping (float): Damping term for the mean-based strategies; min is 0.
    """

    strategy: BaselineStrategy = Field(default=BaselineStrategy.NONE)
    value: Optional[float] = Field(default=None)
    damping: float = Field(default=0.0, ge=0)

    @model_validator(mode="after")
    def validate_strategy_fields(self) -> "BaselineConfig":
        """Ensure required fields are set for the selected baseline strategy.

        Returns:
            BaselineConfig: The object itself.
        """
        if self.strategy == BaselineStrategy.CONSTANT and self.value is None:
            raise AttributeError(f"Attribute `value` must be provided "
                                 f"with `{self.strategy.value}` strategy.")

        return self


# Slope One configuration

class SlopeOneConfig(BaseValidator):
    """Slope One model configuration.

    Attributes:
        weighted (bool): Use the weighted predictor; default is False.
        damping (float): Added to the co-rating count when averaging deviations; min is 0.
    """

    weighted: bool = Field(default=False)
    damping: float = Field(default=0.0, ge=0)


class ExperimentConfig(BaseValidator):
    """Full pipeline configuration.

    Attributes:
        data_config (DataLoadingConfig): Where to read ratings from.
        domain (DomainConfig): Rating domain predictions are clamped to.
        baseline (BaselineConfig): Fallback predictor.
        model (SlopeOneConfig): Model and predictor options.
        output_path (Optional[str]): Where to store the predictions, if anywhere.
        path_log_folder (str): Log folder; default is `./log`.
        path_logger_config (Optional[str]): Logging YAML; the packaged one when missing.
        log_level (str): Level applied to every logger; default is `INFO`.
    """

    data_config: DataLoadingConfig
    domain: DomainConfig = Field(default_factory=DomainConfig)
    baseline: BaselineConfig = Field(default_factory=BaselineConfig)
    model: SlopeOneConfig = Field(default_factory=SlopeOneConfig)
    output_path: Optional[str] = Field(default=None)
    path_log_folder: str = Field(default="./log")
    path_logger_config: Optional[str] = Field(default=None)
    log_level: str = Field(default="INFO")
