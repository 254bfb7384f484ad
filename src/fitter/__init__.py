from src.fitter.recipient_fitter import BadgeMetrics, FitResult, badge_label, fit_recipients

__all__ = ["BadgeMetrics", "FitResult", "badge_label", "fit_recipients"]
