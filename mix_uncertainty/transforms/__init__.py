from mix_uncertainty.transforms.logit import invlogit, logit

__all__ = ["invlogit", "logit"]
