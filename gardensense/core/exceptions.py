class GardenSenseError(Exception):
    """Base class for errors raised by the garden intelligence engine."""


class CatalogLoadError(GardenSenseError):
    """The reference dataset could not be read or parsed."""


class NotPlantedError(GardenSenseError):
    """A growth timeline was requested for a plant that is only planned."""

    def __init__(self, plant_name: str = ""):
        self.plant_name = plant_name
        label = plant_name or "Plant"
        super().__init__(f"{label} has not been planted yet; no growth timeline available")
