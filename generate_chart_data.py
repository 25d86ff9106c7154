"""Generate chart data for static HTML export."""
import asyncio
import json

import pandas as pd
from macro_dashboard.config import Settings
from macro_dashboard.indicators.calculator import MacroCalculator

settings = Settings()


async def load():
    async with MacroCalculator(settings) as calc:
        return await calc.load_all(
            calc.window(settings.default_years),
            calc.window(settings.default_hdi_years),
        )


economic, social = asyncio.run(load())
if economic.error:
    print(f"WARNING: {economic.error}")

gdp = pd.DataFrame([r.to_dict() for r in economic.gdp_records])
ad_as = pd.DataFrame([p.__dict__ for p in economic.ad_as()])
islm = pd.DataFrame([p.__dict__ for p in economic.islm_trajectory()])
hdi = pd.DataFrame([p.to_dict() for p in social.points])

stats = economic.period_stats()

output = {
    'country': settings.country_code,
    'period': stats.label,
    'stats': {
        'gdp': round(stats.gdp, 1),
        'inflation': round(stats.inflation, 1),
        'unemployment': round(stats.unemployment, 1),
        'money_multiplier': round(stats.money_multiplier, 1),
    },
    'years': gdp['year'].tolist() if not gdp.empty else [],
    'gdp': json.loads(gdp.round(2).to_json(orient='records')) if not gdp.empty else [],
    'ad_as': json.loads(ad_as.round(2).to_json(orient='records')) if not ad_as.empty else [],
    'islm': json.loads(islm.round(2).to_json(orient='records')) if not islm.empty else [],
    'hdi': json.loads(hdi.round(3).to_json(orient='records')) if not hdi.empty else [],
}

with open('chart_data.json', 'w') as f:
    json.dump(output, f)

print(f"Saved {len(output['years'])} years of data to chart_data.json")
