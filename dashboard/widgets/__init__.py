# dashboard/widgets/__init__.py

from .charts import build_charts
from .cards import summary_row, status_banner, chart_grid
