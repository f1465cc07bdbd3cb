from typing import Dict, List

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from command_center.data_model import IntentShare


class ChartBuilder:
    """Handles all visualization logic"""

    @staticmethod
    def create_insights_figure(intent_shares: List[IntentShare], risk_counts: Dict[str, int]) -> go.Figure:
        """Create the insights figure: top failure intents and the risk mix"""
        fig = make_subplots(
            rows=1, cols=2,
            subplot_titles=('Top Failure Intents', 'Queries by Risk Tag'),
            specs=[[{"type": "bar"}, {"type": "pie"}]],
            horizontal_spacing=0.1
        )

        fig.add_trace(
            go.Bar(
                x=[share.count for share in intent_shares],
                y=[share.intent for share in intent_shares],
                orientation='h',
                name='Queries',
                text=[f"{share.percent}%" for share in intent_shares],
                hovertemplate='Intent: %{y}<br>Queries: %{x}<extra></extra>'
            ),
            row=1, col=1
        )

        # Skip empty slices so the pie only shows tags that occur
        labels = [tag for tag, count in risk_counts.items() if count > 0]
        fig.add_trace(
            go.Pie(
                labels=labels,
                values=[risk_counts[tag] for tag in labels],
                name='Risk Tags',
                hovertemplate='Risk: %{label}<br>Queries: %{value}<extra></extra>'
            ),
            row=1, col=2
        )

        fig.update_layout(
            height=450,
            showlegend=True,
            title_text="Failure Insights",
        )
        fig.update_yaxes(autorange="reversed", row=1, col=1)
        fig.update_xaxes(title_text="Queries", row=1, col=1)

        return fig
