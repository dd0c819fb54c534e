"""Loaders and ready-made plots for GlueX, J/psi-007, SLAC pion and pi-Delta data sets."""