from .plot_mfs import plot_mfs
