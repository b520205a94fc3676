from .base_mf import InputMF, Membership, OutputMF
from .triangle import TriMF
