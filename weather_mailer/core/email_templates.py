"""Email templates for the daily weather report and service errors."""

import html


def get_weather_report_page(content_html: str, generated_at: str) -> str:
    """
    Wrap already-formatted report content in the report page.

    Args:
        content_html: Report body, already escaped and styled
        generated_at: Human-readable generation time for the footer

    Returns:
        Complete HTML document
    """
    html_body = f"""
<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <style>
        body {{ font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px; }}
        .header {{ background: linear-gradient(135deg, #74b9ff, #0984e3); color: white; padding: 20px; border-radius: 10px; text-align: center; margin-bottom: 20px; }}
        .content {{ background: #f8f9fa; padding: 20px; border-radius: 10px; border-left: 4px solid #74b9ff; }}
        .footer {{ text-align: center; margin-top: 20px; color: #666; font-size: 0.9em; }}
    </style>
</head>
<body>
    <div class="header">
        <h1>🌤️ Daily Weather Report</h1>
    </div>
    <div class="content">
        {content_html}
    </div>
    <div class="footer">
        <p>Generated at {html.escape(generated_at)}</p>
        <p>Powered by OpenWeatherMap &amp; AWS</p>
    </div>
</body>
</html>
    """
    return html_body.strip()


def get_service_error_email(error_message: str, occurred_at: str) -> tuple[str, str]:
    """
    Get HTML and plain text versions of the service error notification.

    Args:
        error_message: What went wrong
        occurred_at: Human-readable time of the failure

    Returns:
        Tuple of (html_body, text_body)
    """
    text_body = f"An error occurred while fetching weather data: {error_message}"

    html_body = f"""
<div style="background: #fee; border: 1px solid #fcc; padding: 15px; border-radius: 5px;">
    <h3 style="color: #c33;">⚠️ Weather Service Error</h3>
    <p>{html.escape(text_body)}</p>
    <p><small>Time: {html.escape(occurred_at)}</small></p>
</div>
    """
    return (html_body.strip(), text_body)
