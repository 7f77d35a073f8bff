"""
Presentation helpers.

Turns core results into display objects; the core never imports this:
- components.charts: Plotly figures for comparison reports
"""
