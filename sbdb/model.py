"""Field names and typed records for the JPL Small-Body Database (SBDB) Query API.

The API is documented at https://ssd-api.jpl.nasa.gov/doc/sbdb_query.html and
https://ssd-api.jpl.nasa.gov/doc/sbdb_filter.html.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

__all__ = [
    "Field",
    "Body",
    "Identity",
    "Orbit",
    "Uncertainty",
    "Solution",
    "Quality",
    "NonGrav",
    "Physical",
    "identity_fields",
    "orbit_fields",
    "uncertainty_fields",
    "solution_fields",
    "nongrav_fields",
    "physical_fields",
]


class Field(str, Enum):
    """An SBDB field name, used to build queries and to read responses."""

    # Identity
    SPK_ID = "spkid"  # SPICE identifier for the body
    FULL_NAME = "full_name"  # Complete object designation
    KIND = "kind"  # Body kind, e.g. asteroid or comet
    PDES = "pdes"  # Primary designation
    NAME = "name"  # IAU name
    PREFIX = "prefix"  # Numbered prefix
    CLASS = "class"  # Dynamical class
    NEO = "neo"  # Near Earth Object flag
    PHA = "pha"  # Potentially Hazardous Asteroid flag
    SATS = "sats"  # Number of known satellites
    T_JUPITER = "t_jup"  # Tisserand parameter w.r.t. Jupiter
    MOID = "moid"  # Earth minimum orbit intersection distance (au)
    MOID_LD = "moid_ld"  # Earth MOID in lunar distances
    MOID_JUPITER = "moid_jup"  # Jupiter MOID (au)

    # Orbit
    ORBIT_ID = "orbit_id"
    EPOCH = "epoch"  # JD
    EPOCH_MJD = "epoch_mjd"
    EPOCH_CAL = "epoch_cal"
    EQUINOX = "equinox"
    ECCENTRICITY = "e"
    SEMIMAJOR_AXIS = "a"  # au
    PERIHELION_DIST = "q"  # au
    INCLINATION = "i"  # deg
    ASC_NODE = "om"  # deg
    PERIAPSIS_ARG = "w"  # deg
    MEAN_ANOMALY = "ma"  # deg
    PERIAPSIS_TIME = "tp"  # JD
    PERIAPSIS_TIME_CAL = "tp_cal"
    ORBITAL_PERIOD = "per"  # days
    ORBITAL_PERIOD_YR = "per_y"  # years
    MEAN_MOTION = "n"  # deg/day
    APHELION_DIST = "ad"  # au

    # Uncertainty (1-sigma)
    SIGMA_ECC = "sigma_e"
    SIGMA_A = "sigma_a"
    SIGMA_Q = "sigma_q"
    SIGMA_I = "sigma_i"
    SIGMA_ASC_NODE = "sigma_om"
    SIGMA_PERI_ARG = "sigma_w"
    SIGMA_TP = "sigma_tp"
    SIGMA_MA = "sigma_ma"
    SIGMA_PERIOD = "sigma_per"
    SIGMA_N = "sigma_n"
    SIGMA_AD = "sigma_ad"

    # Solution and fit quality
    SOURCE = "source"
    SOLUTION_DATE = "soln_date"
    PRODUCER = "producer"
    DATA_ARC = "data_arc"  # days
    FIRST_OBS = "first_obs"
    LAST_OBS = "last_obs"
    OBS_USED = "n_obs_used"
    DELAY_OBS_USED = "n_del_obs_used"
    DOPPLER_OBS_USED = "n_dop_obs_used"
    TWO_BODY = "two_body"
    PE_USED = "pe_used"
    SB_USED = "sb_used"
    CONDITION_CODE = "condition_code"
    RMS = "rms"  # arcsec

    # Non-gravitational parameters
    A1 = "A1"
    A2 = "A2"
    A3 = "A3"
    DT = "DT"
    S0 = "S0"
    A1_SIGMA = "A1_sigma"
    A2_SIGMA = "A2_sigma"
    A3_SIGMA = "A3_sigma"
    DT_SIGMA = "DT_sigma"
    S0_SIGMA = "S0_sigma"

    # Physical properties
    H = "H"
    G = "G"
    M1 = "M1"
    K1 = "K1"
    M2 = "M2"
    K2 = "K2"
    PC = "PC"
    H_SIGMA = "H_sigma"
    DIAMETER = "diameter"  # km
    EXTENT = "extent"  # km
    GM = "GM"  # km^3/s^2
    DENSITY = "density"  # g/cm^3
    ROT_PER = "rot_per"  # hours
    POLE = "pole"
    ALBEDO = "albedo"
    BV = "BV"
    UB = "UB"
    IR = "IR"
    SPEC_T = "spec_T"
    SPEC_B = "spec_B"
    DIAMETER_SIGMA = "diameter_sigma"  # km

    def __str__(self) -> str:
        return self.value


def _slot(source: Field):
    """A dataclass field that defaults to None and remembers its SBDB field."""
    return field(default=None, metadata={"sbdb": source})


def identity_fields() -> list[Field]:
    """All fields that make up an Identity."""
    return [
        Field.SPK_ID, Field.FULL_NAME, Field.KIND, Field.PDES, Field.NAME,
        Field.PREFIX, Field.CLASS, Field.NEO, Field.PHA, Field.SATS,
        Field.T_JUPITER, Field.MOID, Field.MOID_LD, Field.MOID_JUPITER,
    ]


def orbit_fields() -> list[Field]:
    """All fields that make up an Orbit."""
    return [
        Field.ORBIT_ID, Field.EPOCH, Field.EPOCH_MJD, Field.EPOCH_CAL,
        Field.EQUINOX, Field.ECCENTRICITY, Field.SEMIMAJOR_AXIS,
        Field.PERIHELION_DIST, Field.INCLINATION, Field.ASC_NODE,
        Field.PERIAPSIS_ARG, Field.MEAN_ANOMALY, Field.PERIAPSIS_TIME,
        Field.PERIAPSIS_TIME_CAL, Field.ORBITAL_PERIOD, Field.ORBITAL_PERIOD_YR,
        Field.MEAN_MOTION, Field.APHELION_DIST,
    ]


def uncertainty_fields() -> list[Field]:
    """All fields that make up an Uncertainty."""
    return [
        Field.SIGMA_ECC, Field.SIGMA_A, Field.SIGMA_Q, Field.SIGMA_I,
        Field.SIGMA_ASC_NODE, Field.SIGMA_PERI_ARG, Field.SIGMA_TP,
        Field.SIGMA_MA, Field.SIGMA_PERIOD, Field.SIGMA_N, Field.SIGMA_AD,
    ]


def solution_fields() -> list[Field]:
    """All solution fields, including the fit-quality ones."""
    return [
        Field.SOURCE, Field.SOLUTION_DATE, Field.PRODUCER, Field.DATA_ARC,
        Field.FIRST_OBS, Field.LAST_OBS, Field.OBS_USED, Field.DELAY_OBS_USED,
        Field.DOPPLER_OBS_USED, Field.TWO_BODY, Field.PE_USED, Field.SB_USED,
        Field.CONDITION_CODE, Field.RMS,
    ]


def nongrav_fields() -> list[Field]:
    """All fields that make up a NonGrav."""
    return [
        Field.A1, Field.A2, Field.A3, Field.DT, Field.S0,
        Field.A1_SIGMA, Field.A2_SIGMA, Field.A3_SIGMA, Field.DT_SIGMA,
        Field.S0_SIGMA,
    ]


def physical_fields() -> list[Field]:
    """All fields that make up a Physical."""
    return [
        Field.H, Field.G, Field.M1, Field.K1, Field.M2, Field.K2, Field.PC,
        Field.H_SIGMA, Field.DIAMETER, Field.EXTENT, Field.GM, Field.DENSITY,
        Field.ROT_PER, Field.POLE, Field.ALBEDO, Field.BV, Field.UB, Field.IR,
        Field.SPEC_T, Field.SPEC_B, Field.DIAMETER_SIGMA,
    ]


@dataclass
class Identity:
    """Name and classification data."""

    spk_id: Optional[int] = _slot(Field.SPK_ID)
    full_name: Optional[str] = _slot(Field.FULL_NAME)
    kind: Optional[str] = _slot(Field.KIND)
    pdes: Optional[str] = _slot(Field.PDES)
    name: Optional[str] = _slot(Field.NAME)
    prefix: Optional[str] = _slot(Field.PREFIX)
    klass: Optional[str] = _slot(Field.CLASS)
    neo: Optional[bool] = _slot(Field.NEO)
    pha: Optional[bool] = _slot(Field.PHA)
    sats: Optional[int] = _slot(Field.SATS)
    t_jupiter: Optional[float] = _slot(Field.T_JUPITER)
    moid: Optional[float] = _slot(Field.MOID)
    moid_ld: Optional[float] = _slot(Field.MOID_LD)
    moid_jupiter: Optional[float] = _slot(Field.MOID_JUPITER)


@dataclass
class Orbit:
    """Osculating orbital elements."""

    orbit_id: Optional[str] = _slot(Field.ORBIT_ID)
    epoch: Optional[float] = _slot(Field.EPOCH)
    epoch_mjd: Optional[float] = _slot(Field.EPOCH_MJD)
    epoch_cal: Optional[str] = _slot(Field.EPOCH_CAL)
    equinox: Optional[str] = _slot(Field.EQUINOX)
    eccentricity: Optional[float] = _slot(Field.ECCENTRICITY)
    semimajor_axis: Optional[float] = _slot(Field.SEMIMAJOR_AXIS)
    perihelion_dist: Optional[float] = _slot(Field.PERIHELION_DIST)
    inclination: Optional[float] = _slot(Field.INCLINATION)
    asc_node: Optional[float] = _slot(Field.ASC_NODE)
    periapsis_arg: Optional[float] = _slot(Field.PERIAPSIS_ARG)
    mean_anomaly: Optional[float] = _slot(Field.MEAN_ANOMALY)
    periapsis_time: Optional[float] = _slot(Field.PERIAPSIS_TIME)
    periapsis_time_cal: Optional[str] = _slot(Field.PERIAPSIS_TIME_CAL)
    orbital_period: Optional[float] = _slot(Field.ORBITAL_PERIOD)
    orbital_period_yr: Optional[float] = _slot(Field.ORBITAL_PERIOD_YR)
    mean_motion: Optional[float] = _slot(Field.MEAN_MOTION)
    aphelion_dist: Optional[float] = _slot(Field.APHELION_DIST)


@dataclass
class Uncertainty:
    """One-sigma uncertainties of the orbital elements."""

    sigma_ecc: Optional[float] = _slot(Field.SIGMA_ECC)
    sigma_a: Optional[float] = _slot(Field.SIGMA_A)
    sigma_q: Optional[float] = _slot(Field.SIGMA_Q)
    sigma_i: Optional[float] = _slot(Field.SIGMA_I)
    sigma_asc_node: Optional[float] = _slot(Field.SIGMA_ASC_NODE)
    sigma_peri_arg: Optional[float] = _slot(Field.SIGMA_PERI_ARG)
    sigma_tp: Optional[float] = _slot(Field.SIGMA_TP)
    sigma_ma: Optional[float] = _slot(Field.SIGMA_MA)
    sigma_period: Optional[float] = _slot(Field.SIGMA_PERIOD)
    sigma_n: Optional[float] = _slot(Field.SIGMA_N)
    sigma_ad: Optional[float] = _slot(Field.SIGMA_AD)


@dataclass
class Solution:
    """Provenance of the orbit solution."""

    source: Optional[str] = _slot(Field.SOURCE)
    solution_date: Optional[str] = _slot(Field.SOLUTION_DATE)
    producer: Optional[str] = _slot(Field.PRODUCER)
    data_arc: Optional[int] = _slot(Field.DATA_ARC)
    first_obs: Optional[str] = _slot(Field.FIRST_OBS)
    last_obs: Optional[str] = _slot(Field.LAST_OBS)
    obs_used: Optional[int] = _slot(Field.OBS_USED)
    delay_obs_used: Optional[int] = _slot(Field.DELAY_OBS_USED)
    doppler_obs_used: Optional[int] = _slot(Field.DOPPLER_OBS_USED)


@dataclass
class Quality:
    """Orbit fit and modelling options."""

    two_body: Optional[bool] = _slot(Field.TWO_BODY)
    pe_used: Optional[str] = _slot(Field.PE_USED)
    sb_used: Optional[str] = _slot(Field.SB_USED)
    condition_code: Optional[int] = _slot(Field.CONDITION_CODE)
    rms: Optional[float] = _slot(Field.RMS)


@dataclass
class NonGrav:
    """Non-gravitational parameters."""

    a1: Optional[float] = _slot(Field.A1)
    a2: Optional[float] = _slot(Field.A2)
    a3: Optional[float] = _slot(Field.A3)
    dt: Optional[float] = _slot(Field.DT)
    s0: Optional[float] = _slot(Field.S0)
    a1_sigma: Optional[float] = _slot(Field.A1_SIGMA)
    a2_sigma: Optional[float] = _slot(Field.A2_SIGMA)
    a3_sigma: Optional[float] = _slot(Field.A3_SIGMA)
    dt_sigma: Optional[float] = _slot(Field.DT_SIGMA)
    s0_sigma: Optional[float] = _slot(Field.S0_SIGMA)


@dataclass
class Physical:
    """Physical and photometric parameters."""

    h: Optional[float] = _slot(Field.H)
    g: Optional[float] = _slot(Field.G)
    m1: Optional[float] = _slot(Field.M1)
    k1: Optional[float] = _slot(Field.K1)
    m2: Optional[float] = _slot(Field.M2)
    k2: Optional[float] = _slot(Field.K2)
    pc: Optional[float] = _slot(Field.PC)
    h_sigma: Optional[float] = _slot(Field.H_SIGMA)
    diameter: Optional[float] = _slot(Field.DIAMETER)
    extent: Optional[str] = _slot(Field.EXTENT)
    gm: Optional[float] = _slot(Field.GM)
    density: Optional[float] = _slot(Field.DENSITY)
    rot_per: Optional[float] = _slot(Field.ROT_PER)
    pole: Optional[str] = _slot(Field.POLE)
    albedo: Optional[float] = _slot(Field.ALBEDO)
    bv: Optional[float] = _slot(Field.BV)
    ub: Optional[float] = _slot(Field.UB)
    ir: Optional[float] = _slot(Field.IR)
    spec_t: Optional[str] = _slot(Field.SPEC_T)
    spec_b: Optional[str] = _slot(Field.SPEC_B)
    diameter_sigma: Optional[float] = _slot(Field.DIAMETER_SIGMA)


@dataclass
class Body:
    """A small-body record from the SBDB Query API."""

    identity: Identity = field(default_factory=Identity)
    orbit: Orbit = field(default_factory=Orbit)
    uncertainty: Uncertainty = field(default_factory=Uncertainty)
    solution: Solution = field(default_factory=Solution)
    quality: Quality = field(default_factory=Quality)
    nongrav: NonGrav = field(default_factory=NonGrav)
    physical: Physical = field(default_factory=Physical)