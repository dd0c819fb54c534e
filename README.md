# photoprod

Tools for photoproduction phenomenology.

- **Nucleon structure functions** F_1 and F_2:
  - `photoprod.christy_bosted.ChristyBostedF` covers the resonance region. It sums Breit–Wigner resonances (`Resonance`) and a non-resonant background. It works for the proton, the neutron or the nucleon average (`Nucleon`).
  - `photoprod.donnachie_landshoff.DonnachieLandshoffF` is a high-energy sum of three Regge exchanges.
  - `photoprod.pdf_structure.PdfF` is the charge-weighted sum of leading-order parton distributions. The distributions (`XPdf`) are read from a grid and interpolated with `PdfInterpolator`.
- **Helicity bookkeeping** in `photoprod.helicities`: `get_helicities`, `find_helicity`, `print_helicities` and the `HelicityFrame` enum.
- **Lorentz tensors** in `photoprod.tensors`: `LorentzVector`, `MetricTensor` (signature +,−,−,−) and `LeviCivitaTensor`. Each is indexed by calling it with `LorentzIndex` values.
- **Kinematics and constants** in `photoprod.constants`:
  - `kallen`, the Källén function
  - `s_cm`, `w_cm` and `e_beam`, which convert between the lab photon energy and centre-of-mass energy on a proton at rest
- **Data sets** in `photoprod.data_set`:
  - the `DataSet` container
  - `import_data`, `import_transposed`, `reshape_data` and `check`
- **Experimental data loaders** in `photoprod.data`:
  - `gluex`: GlueX J/ψ integrated and differential cross sections
  - `jpsi007`: J/ψ-007 energy bins
  - `slac_pion`: SLAC charged-pion tables
  - `pi_delta`: π Δ cross section, SDMEs and beam asymmetry
  - `plots`: ready-made plots of all of the above
- **Plotting** in `photoprod.plot`: `Plot` collects data, curves and bands and draws them with matplotlib. `combine` lays several plots out on a grid in one file.
- **χ²** in `photoprod.chi2`: `chi2_integrated`, `chi2_differential`, `chi2_differential_tprime`, and `fcn`, which adds them up over a list of data sets.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Data files

Data tables are plain text, with whitespace-separated columns. Empty lines and lines starting with `#` are skipped.

Paths are resolved under the directory named by the `JPACPHOTO` environment variable:

```
export JPACPHOTO=/path/to/top/level/directory
```

`jpacphoto_dir()` returns that directory. It raises `DataSetError` if the variable is unset or empty.

Some objects need data files under that directory:

- `XPdf`, and therefore `PdfF` when no `XPdf` is passed in, read `data/CTEQ/xs.dat`, `data/CTEQ/qs.dat` and `data/CTEQ/CT18LO.dat`.
- The loaders in `photoprod.data` read their tables from `data/...` under the same directory.

## Examples

Helicity combinations for a vector meson and a spin-1/2 baryon, with a real photon:

```python
from photoprod.helicities import get_helicities, find_helicity, print_helicities

hels = get_helicities(1, 1, True)
index = find_helicity((1, 1, 1, 1), 1, 1, True)   # 0
print(print_helicities(hels[index]))               # [ +1, +1, +1, +1]
```

`find_helicity` raises `ValueError` for a combination that is not in the list.

Tensor components:

```python
from photoprod.tensors import MetricTensor, LeviCivitaTensor, LorentzIndex

g = MetricTensor()
g(LorentzIndex.t, LorentzIndex.t)   # (1+0j)
g(LorentzIndex.x, LorentzIndex.x)   # (-1+0j)

eps = LeviCivitaTensor()
eps(LorentzIndex.t, LorentzIndex.x, LorentzIndex.y, LorentzIndex.z)   # (1+0j)
```

Passing the wrong number of indices raises `ValueError`.

Structure functions, at invariant mass squared `s` and momentum transfer `q2 < 0`:

```python
from photoprod.christy_bosted import ChristyBostedF
from photoprod.donnachie_landshoff import DonnachieLandshoffF

f2 = ChristyBostedF(2)
f2.evaluate(1.5**2, -2.0)

DonnachieLandshoffF(2).evaluate(10.0**2, -2.0)
```

Loading tables:

```python
from photoprod.data_set import import_data, check
from photoprod.data import gluex, jpsi007

columns = import_data("data/piDelta/data_BSA.txt", 4)
n_points = check(columns, "beam asymmetry")

integrated = gluex.integrated()
slices = jpsi007.all_data()
```

`check` returns 0, with a warning, when the columns differ in length.

χ² of a model against data:

```python
from photoprod.chi2 import fcn

total = fcn(gluex.all_data(), model)
```

The model must provide `integrated_xsection(s)`, `differential_xsection(s, t)` and `t_min(s)`, as described by the `CrossSectionModel` protocol. A data set whose `kind` is not 0, 1 or 2 adds NaN to the total.

## Figures

The `photoprod-figures` command draws one of two figures.

```
photoprod-figures structure-functions -o Fs_compare.pdf
photoprod-figures sigma-tot --path scripts/jpsi_photoproduction/bootstrap/ -o sigma_tot.pdf
```

- `structure-functions` compares the three structure-function models. It saves the comparison to the output file. It also writes `CB_Fs.pdf` next to that file, plotting F_2 against 2 x_B F_1 in the resonance region. It needs the parton-distribution grid.
- `sigma-tot` plots the J/ψ p total cross section for the models `1C`, `2C`, `3C-NR` and `3C-R`. It reads these from `plot_total.txt` in each model's sub-directory of `--path`, under `JPACPHOTO`.

The same figures are available as `photoprod.figures.structure_functions` and `photoprod.figures.sigma_tot`.

## What the package does not do

The package contains no scattering amplitudes, reaction kinematics beyond the functions in `photoprod.constants`, or minimiser. The χ² functions evaluate a model that you supply; they do not fit it.