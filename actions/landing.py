"""Landing page action."""
import random
from typing import Dict, Any, List, Tuple

from actions.base import BaseAction
from config import config
from models.result import Ready

CHART_POINTS = 20
CHART_HEIGHT = 40
CHART_STEP = 5


def sparkline_path(points: List[Tuple[int, float]]) -> str:
    """SVG path through the points, y inverted into a 0-40 viewbox."""
    if not points:
        return ''
    commands = [f"M 0 {CHART_HEIGHT - points[0][1]:.2f}"]
    commands.extend(
        f"L {(x + 1) * CHART_STEP} {CHART_HEIGHT - y:.2f}" for x, y in points
    )
    return ' '.join(commands)


class LandingAction(BaseAction):
    """Marketing landing page with a decorative chart."""

    name = 'LANDING'
    description = 'Landing page with a sample sparkline chart'
    template = 'landing.html'

    def execute(self, parameters: Dict[str, Any]) -> Dict[str, Any]:
        rng = random.Random(parameters.get('seed'))
        points = [(i, rng.random() * 30 + 20) for i in range(CHART_POINTS)]

        return {
            'success': True,
            'state': Ready(),
            'chart_points': points,
            'chart_path': sparkline_path(points),
            'trade_url': config.trade_url,
        }

    def format_response(self, result: Dict[str, Any]) -> str:
        return 'Discover the Next Small Cap Gems'
