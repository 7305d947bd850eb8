from mix_uncertainty.sampling.dirichlet import rdirichlet

__all__ = ["rdirichlet"]
