"""CSS styles for the application"""

STYLES = """
    /* General button styling */
    .stButton > button {
        background-color: #4CAF50;
        color: white;
        padding: 8px 16px;
        border-radius: 4px;
        border: none;
    }
    .stButton > button:hover {
        background-color: #45a049;
    }

    /* Action log entry styling */
    .log-entry {
        background-color: #f8f9fa;
        border-left: 4px solid #4CAF50;
        padding: 15px;
        margin-bottom: 15px;
        border-radius: 4px;
    }

    .log-timestamp {
        color: #666;
        font-size: 0.9em;
    }

    .log-action {
        font-weight: bold;
        margin: 10px 0;
        text-transform: capitalize;
    }

    /* Driver utterance in the detail panel */
    .utterance {
        background-color: #f1f3f5;
        padding: 16px;
        border-radius: 6px;
        font-size: 0.95em;
        line-height: 1.5;
    }

    .confidence-high {
        color: #4CAF50;
    }

    .confidence-medium {
        color: #FFA726;
    }

    .confidence-low {
        color: #EF5350;
    }

    /* Risk badges */
    .risk-badge {
        display: inline-block;
        padding: 2px 10px;
        border-radius: 10px;
        font-size: 0.85em;
        border: 1px solid #ced4da;
    }

    .risk-destructive {
        background-color: #EF5350;
        border-color: #EF5350;
        color: white;
    }

    .risk-secondary {
        background-color: #FFE0B2;
        border-color: #FFA726;
    }

    .risk-outline {
        background-color: transparent;
    }
"""
