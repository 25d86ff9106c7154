"""Configuration settings for the dashboard."""

from dataclasses import dataclass, field
import os

from dotenv import load_dotenv


load_dotenv()


# World Bank indicator codes - macro, GDP components, prices, money supply
ECONOMIC_INDICATORS: dict[str, str] = {
    "gdp": "NY.GDP.MKTP.CD",
    "growth": "NY.GDP.MKTP.KD.ZG",
    "gdp_per_capita": "NY.GDP.PCAP.CD",
    "inflation": "NY.GDP.DEFL.KD.ZG",  # GDP deflator, better coverage than CPI
    "inflation_alt": "FP.CPI.TOTL.ZG",
    "unemployment": "SL.UEM.TOTL.ZS",
    # GDP components (C + I + G + NX)
    "consumption": "NE.CON.PRVT.CD",
    "investment": "NE.GDI.TOTL.CD",
    "government": "NE.CON.GOVT.CD",
    "exports": "NE.EXP.GNFS.CD",
    "imports": "NE.IMP.GNFS.CD",
    # Prices and production factors
    "cpi": "FP.CPI.TOTL",
    "labor_force": "SL.TLF.TOTL.IN",
    "capital_stock": "NE.GDI.FTOT.CD",
    # Money supply family
    "broad_money": "FM.LBL.BMNY.CD",
    "money_supply": "FM.LBL.MQMY.CD",
    "money_supply_growth": "FM.LBL.MQMY.ZG",
    "bank_deposits": "FD.RES.LIQU.AS.ZS",
    "domestic_credit": "FS.AST.DOMS.GD.ZS",
    "reserve_money": "FM.LBL.BMNY.IR.ZS",
    # External sector and rates
    "exchange_rate": "PA.NUS.FCRF",
    "real_exchange_rate": "PX.REX.REER",
    "interest_rate": "FR.INR.RINR",
    "lending_rate": "FR.INR.LEND",
    "current_account": "BN.CAB.XOKA.GD.ZS",
    "foreign_reserves": "FI.RES.TOTL.CD",
    "capital_flows": "BX.KLT.DINV.WD.GD.ZS",
}

# Human development family
SOCIAL_INDICATORS: dict[str, str] = {
    "life_expectancy": "SP.DYN.LE00.IN",
    "literacy": "SE.ADT.LITR.ZS",
    "schooling": "BAR.SCHL.15UP",
    "gni": "NY.GNP.PCAP.PP.CD",
    "poverty": "SI.POV.NAHC",
    "gini": "SI.POV.GINI",
    "health_expenditure": "SH.XPD.CHEX.PC.CD",
    "education_expenditure": "SE.XPD.TOTL.GD.ZS",
}

INDICATOR_TITLES: dict[str, str] = {
    "NY.GDP.MKTP.CD": "GDP (current US$)",
    "NY.GDP.MKTP.KD.ZG": "GDP growth (annual %)",
    "NY.GDP.PCAP.CD": "GDP per capita (current US$)",
    "NY.GDP.DEFL.KD.ZG": "Inflation, GDP deflator (annual %)",
    "FP.CPI.TOTL.ZG": "Inflation, consumer prices (annual %)",
    "SL.UEM.TOTL.ZS": "Unemployment (% of labor force)",
    "NE.CON.PRVT.CD": "Household final consumption (current US$)",
    "NE.GDI.TOTL.CD": "Gross capital formation (current US$)",
    "NE.CON.GOVT.CD": "Government final consumption (current US$)",
    "NE.EXP.GNFS.CD": "Exports of goods and services (current US$)",
    "NE.IMP.GNFS.CD": "Imports of goods and services (current US$)",
    "FP.CPI.TOTL": "Consumer price index (2010 = 100)",
    "SL.TLF.TOTL.IN": "Labor force, total",
    "NE.GDI.FTOT.CD": "Gross fixed capital formation (current US$)",
    "FM.LBL.BMNY.CD": "Broad money (current LCU)",
    "FM.LBL.MQMY.CD": "Money and quasi money (M2)",
    "FM.LBL.MQMY.ZG": "Money and quasi money growth (annual %)",
    "FD.RES.LIQU.AS.ZS": "Bank liquid reserves to bank assets (%)",
    "FS.AST.DOMS.GD.ZS": "Domestic credit by financial sector (% of GDP)",
    "FM.LBL.BMNY.IR.ZS": "Broad money to total reserves ratio",
    "PA.NUS.FCRF": "Official exchange rate (LCU per US$)",
    "PX.REX.REER": "Real effective exchange rate (2010 = 100)",
    "FR.INR.RINR": "Real interest rate (%)",
    "FR.INR.LEND": "Lending interest rate (%)",
    "BN.CAB.XOKA.GD.ZS": "Current account balance (% of GDP)",
    "FI.RES.TOTL.CD": "Total reserves incl. gold (current US$)",
    "BX.KLT.DINV.WD.GD.ZS": "FDI, net inflows (% of GDP)",
    "SP.DYN.LE00.IN": "Life expectancy at birth (years)",
    "SE.ADT.LITR.ZS": "Literacy rate, adult (%)",
    "BAR.SCHL.15UP": "Mean years of schooling (15+)",
    "NY.GNP.PCAP.PP.CD": "GNI per capita, PPP (current intl $)",
    "SI.POV.NAHC": "Poverty headcount, national lines (%)",
    "SI.POV.GINI": "Gini index",
    "SH.XPD.CHEX.PC.CD": "Health expenditure per capita (current US$)",
    "SE.XPD.TOTL.GD.ZS": "Education expenditure (% of GDP)",
}

# Selectable "Last N Years" offsets
YEAR_RANGE_OPTIONS: tuple[int, ...] = (1, 2, 3, 4, 5, 10, 15, 20, 25, 30, 35, 40, 45, 50)


@dataclass
class Settings:
    """Application settings."""

    country_code: str = field(default_factory=lambda: os.getenv("WB_COUNTRY_CODE", "ARG"))
    base_url: str = field(
        default_factory=lambda: os.getenv("WB_BASE_URL", "https://api.worldbank.org/v2")
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.getenv("WB_REQUEST_TIMEOUT", "10"))
    )
    per_page: int = field(default_factory=lambda: int(os.getenv("WB_PER_PAGE", "200")))
    default_years: int = field(default_factory=lambda: int(os.getenv("DEFAULT_YEARS", "15")))
    default_hdi_years: int = field(
        default_factory=lambda: int(os.getenv("DEFAULT_HDI_YEARS", "40"))
    )

    def __post_init__(self) -> None:
        self.country_code = self.country_code.strip().upper()
        self.base_url = self.base_url.rstrip("/")

    def validate(self) -> None:
        """Validate required settings."""
        if len(self.country_code) != 3 or not self.country_code.isalpha():
            raise ValueError(
                f"WB_COUNTRY_CODE must be an ISO3 country code, got {self.country_code!r}"
            )
        if self.request_timeout <= 0:
            raise ValueError("WB_REQUEST_TIMEOUT must be positive")
        if self.per_page <= 0:
            raise ValueError("WB_PER_PAGE must be positive")
