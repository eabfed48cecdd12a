"""Reference timezone table and its grouping into select option groups."""

from typing import Any, Dict, List, Optional, Sequence

import pytz

from block_kit_builder.services.settings.main import settings
from block_kit_builder.utils.logger import get_logger

logger = get_logger(__name__)


def get_timezone_table() -> List[Dict[str, str]]:
    """
    Ordered `{"zoneName": ...}` records for every known timezone.

    The zone list comes from pytz, which keeps it sorted, so the order is stable.
    """
    names = pytz.all_timezones if settings.TIMEZONE_SET == "all" else pytz.common_timezones
    return [{"zoneName": name} for name in names]


def group_timezones(
    table: Optional[Sequence[Dict[str, Any]]] = None, limit: Optional[int] = None
) -> List[Dict[str, Any]]:
    """
    Bucket timezone names by region and return them as option groups.

    The region is the part of the name before the first `/`. A region holding more
    than `limit` zones is split in two groups, `<region>-1` with the first `limit`
    zones and `<region>-2` with the rest. Groups keep the order regions first appear in.

    :param table: `{"zoneName": ...}` records, defaults to the reference table
    :param limit: maximum zones per group, defaults to the OPTION_GROUP_LIMIT setting
    :return: `{"label": ..., "options": [{"text": ..., "value": ...}]}` records
    """
    if table is None:
        table = get_timezone_table()
    if limit is None:
        limit = settings.OPTION_GROUP_LIMIT

    regions: Dict[str, List[Dict[str, str]]] = {}
    for record in table:
        zone_name = record["zoneName"]
        region = zone_name.split("/")[0]
        regions.setdefault(region, []).append({"text": zone_name, "value": zone_name})

    groups = []
    for region, zones in regions.items():
        if len(zones) > limit:
            logger.debug("timezone_region_split", region=region, size=len(zones))
            groups.append({"label": f"{region}-1", "options": zones[:limit]})
            groups.append({"label": f"{region}-2", "options": zones[limit:]})
        else:
            groups.append({"label": region, "options": zones})
    return groups
