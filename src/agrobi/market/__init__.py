from .indicators import (  # noqa
    AgroKPIs,
    MilkKPIs,
    agro_kpis,
    average_by_region,
    average_by_year,
    list_regions,
    milk_kpis,
    prepare_agro_frame,
    region_evolution,
)

__all__ = [
    "AgroKPIs",
    "MilkKPIs",
    "agro_kpis",
    "average_by_region",
    "average_by_year",
    "list_regions",
    "milk_kpis",
    "prepare_agro_frame",
    "region_evolution",
]
