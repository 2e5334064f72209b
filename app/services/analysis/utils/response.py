"""Report response utility functions."""

def generate_report_summary(score: int) -> str:
    """
    Generate the score interpretation shown alongside a report.

    Args:
        score: The overall score from 0-100

    Returns:
        A one-sentence interpretation of the score band
    """
    if score >= 80:
        return "Excellent! Your website is highly optimized for AI systems and training."

    elif score >= 60:
        return "Good foundation with room for improvement in key areas."

    else:
        return "Significant opportunities to enhance AI compatibility and discoverability."
