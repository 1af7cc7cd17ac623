from .utils.params.params import (
    DEFAULT_PARAMETERS,
    PARAMETER_NAMES,
    load_configuration,
    parameters_from_json,
    validate_parameters,
)
from .utils.presets.presets import apply_preset
from .utils.simulation.scen_metrics import recompute
from .utils.plotting.plotting import metrics_to_json
from dataclasses import replace
import json
import logging
import os

logger = logging.getLogger(__name__)


class Model:
    """
    A class to represent an interactive mission-planning session for pyoscp.

    The session is the single writer of the mission parameters. Every mutation
    installs a new immutable snapshot and bumps the version; derived metrics are
    recomputed on demand and cached against the version they were computed for.

    Attributes:
        parameters (MissionParameters): Current parameter snapshot.
        version (int): Number of mutations applied since the session started.
        scaling (DebrisScaling, optional): External debris model factors.
        simulation_name (str, optional): Name of the configuration the session was built from.
    """
    def __init__(self, parameters=None, scaling=None, simulation_name=None):
        """
        Initialize the session.

        Args:
            parameters (MissionParameters, optional): Initial snapshot. Defaults to DEFAULT_PARAMETERS.
            scaling (DebrisScaling, optional): External debris model factors.
            simulation_name (str, optional): Label for the session.

        Raises:
            ValueError: If the initial parameters are invalid.
        """
        if parameters is None:
            parameters = DEFAULT_PARAMETERS

        self._parameters = validate_parameters(parameters)
        self._version = 0
        self._metrics = None
        self._scaling = scaling
        self.simulation_name = simulation_name

    @classmethod
    def from_json(cls, path, scaling=None):
        """
        Create a session from a simulation configuration file.

        A ``preset`` in the configuration is applied first; explicit
        ``mission_parameters`` then override single fields of it.

        Args:
            path (str): Path to the JSON configuration.
            scaling (DebrisScaling, optional): External debris model factors.

        Returns:
            Model: The configured session.

        Raises:
            ValueError: If the file or any parameter in it is invalid.
        """
        configuration = load_configuration(path)

        base = DEFAULT_PARAMETERS
        if configuration.get("preset") is not None:
            base = apply_preset(configuration["preset"])

        parameters = parameters_from_json(configuration.get("mission_parameters", {}), base=base)
        return cls(parameters, scaling=scaling, simulation_name=configuration["simulation_name"])

    @property
    def parameters(self):
        return self._parameters

    @property
    def version(self):
        return self._version

    @property
    def scaling(self):
        return self._scaling

    def _install(self, parameters):
        self._parameters = parameters
        self._version += 1
        self._metrics = None

    def update(self, **changes):
        """
        Change one or more mission parameters.

        Args:
            **changes: Parameter names and their new values.

        Returns:
            MissionParameters: The new snapshot.

        Raises:
            ValueError: If a name is not a mission parameter or a value is invalid.
                The session is left unchanged.
        """
        unknown = sorted(set(changes) - set(PARAMETER_NAMES))
        if unknown:
            raise ValueError(f"Unknown mission parameters: {unknown}. Please use values from {list(PARAMETER_NAMES)}.")

        self._install(validate_parameters(replace(self._parameters, **changes)))
        return self._parameters

    def apply_preset(self, name):
        """
        Replace every mission parameter with the values of a named preset.

        Raises:
            ValueError: If the preset name is unknown. The session is left unchanged.
        """
        self._install(apply_preset(name))
        logger.info("Applied preset %s (version %d)", name, self._version)
        return self._parameters

    def reset(self):
        self._install(DEFAULT_PARAMETERS)
        return self._parameters

    @property
    def metrics(self):
        """
        Derived metrics of the current snapshot, recomputed if the cache is stale.

        Returns:
            ScenarioMetrics: Results all computed from ``self.parameters``.
        """
        if self._metrics is None or self._metrics.version != self._version:
            self._metrics = recompute(self._parameters, self._scaling, version=self._version)
        return self._metrics

    def results_to_json(self):
        """
        Convert the current metrics to JSON format.

        Returns:
            dict: JSON representation of the session results.
        """
        data = metrics_to_json(self.metrics)
        data["simulation_name"] = self.simulation_name
        return data


if __name__ == "__main__":

    logging.basicConfig(level=logging.INFO)

    model = Model.from_json(os.path.join(os.path.dirname(__file__), 'simulation_configurations', 'default.json'))
    print(json.dumps(model.results_to_json(), indent=4))
