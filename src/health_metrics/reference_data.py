"""
Static biomarker reference catalog.

Ranges are in US conventional units. Calculated entries carry a display
formula only; see `health_metrics.calculations` for the executable versions.
"""
from types import MappingProxyType

from .definitions import BiomarkerReference, Category, Direction, Range

_REFERENCES = [
    # Lipid panel
    BiomarkerReference(
        id="totalCholesterol",
        name="Total Cholesterol",
        category=Category.LIPIDS,
        unit="mg/dL",
        standard_range=Range(max=200),
        optimal_range=Range(max=180),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="ldl",
        name="LDL-C",
        category=Category.LIPIDS,
        unit="mg/dL",
        standard_range=Range(max=100),
        optimal_range=Range(max=70),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="hdl",
        name="HDL-C",
        category=Category.LIPIDS,
        unit="mg/dL",
        standard_range=Range(min=40),
        optimal_range=Range(min=60, max=100),
        direction=Direction.HIGHER,
        male_optimal=Range(min=60, max=100),
        female_optimal=Range(min=60, max=100),
    ),
    BiomarkerReference(
        id="triglycerides",
        name="Triglycerides",
        category=Category.LIPIDS,
        unit="mg/dL",
        standard_range=Range(max=150),
        optimal_range=Range(max=70),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="apoB",
        name="ApoB",
        category=Category.LIPIDS,
        unit="mg/dL",
        standard_range=Range(max=90),
        optimal_range=Range(min=40, max=70),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="lpa",
        name="Lp(a)",
        category=Category.LIPIDS,
        unit="nmol/L",
        standard_range=Range(max=75),
        optimal_range=Range(max=50),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="ldlP",
        name="LDL-P",
        category=Category.LIPIDS,
        unit="nmol/L",
        standard_range=Range(max=1300),
        optimal_range=Range(max=1000),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="sdLDL",
        name="Small Dense LDL",
        category=Category.LIPIDS,
        unit="nmol/L",
        standard_range=Range(max=527),
        optimal_range=Range(max=142),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="vldl",
        name="VLDL",
        category=Category.LIPIDS,
        unit="mg/dL",
        standard_range=Range(max=30),
        optimal_range=Range(max=30),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="nonHdlC",
        name="Non-HDL-C",
        category=Category.LIPIDS,
        unit="mg/dL",
        standard_range=Range(max=130),
        optimal_range=Range(max=100),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="totalCholesterol - hdl",
    ),
    BiomarkerReference(
        id="oxidizedLDL",
        name="Oxidized LDL",
        category=Category.LIPIDS,
        unit="U/L",
        standard_range=Range(max=70),
        optimal_range=Range(max=60),
        direction=Direction.LOWER,
    ),
    # Lipid ratios
    BiomarkerReference(
        id="tcHdlRatio",
        name="TC/HDL Ratio (Castelli Index)",
        category=Category.LIPID_RATIOS,
        unit="ratio",
        optimal_range=Range(max=3.5),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="totalCholesterol / hdl",
    ),
    BiomarkerReference(
        id="ldlHdlRatio",
        name="LDL/HDL Ratio",
        category=Category.LIPID_RATIOS,
        unit="ratio",
        optimal_range=Range(max=2.0),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="ldl / hdl",
    ),
    BiomarkerReference(
        id="tgHdlRatio",
        name="TG/HDL Ratio",
        category=Category.LIPID_RATIOS,
        unit="ratio",
        optimal_range=Range(max=1.0),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="triglycerides / hdl",
    ),
    BiomarkerReference(
        id="atherogenicIndex",
        name="Atherogenic Index of Plasma",
        category=Category.LIPID_RATIOS,
        unit="index",
        optimal_range=Range(max=0.11),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="log10(triglycerides / hdl) [mmol/L]",
    ),
    BiomarkerReference(
        id="remnantCholesterol",
        name="Remnant Cholesterol",
        category=Category.LIPID_RATIOS,
        unit="mg/dL",
        optimal_range=Range(max=30),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="totalCholesterol - hdl - ldl",
    ),
    BiomarkerReference(
        id="atherogenicCoeff",
        name="Atherogenic Coefficient",
        category=Category.LIPID_RATIOS,
        unit="ratio",
        optimal_range=Range(max=3.0),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="(TC - HDL) / HDL",
    ),
    BiomarkerReference(
        id="ldlApoBRatio",
        name="LDL/ApoB Ratio",
        category=Category.LIPID_RATIOS,
        unit="ratio",
        optimal_range=Range(min=1.3, max=1.5),
        direction=Direction.MID_RANGE,
        is_calculated=True,
        formula="LDL / ApoB",
    ),
    BiomarkerReference(
        id="nonHdlApoBRatio",
        name="Non-HDL/ApoB Ratio",
        category=Category.LIPID_RATIOS,
        unit="ratio",
        optimal_range=Range(min=1.4, max=1.6),
        direction=Direction.MID_RANGE,
        is_calculated=True,
        formula="(TC - HDL) / ApoB",
    ),
    BiomarkerReference(
        id="tgApoBRatio",
        name="TG/ApoB Ratio",
        category=Category.LIPID_RATIOS,
        unit="ratio",
        optimal_range=Range(max=0.8),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="TG / ApoB",
    ),
    BiomarkerReference(
        id="ldlTcRatio",
        name="LDL/TC Ratio",
        category=Category.LIPID_RATIOS,
        unit="ratio",
        optimal_range=Range(max=0.6),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="LDL / TC",
    ),
    BiomarkerReference(
        id="nonHdlTcRatio",
        name="Non-HDL/TC Ratio",
        category=Category.LIPID_RATIOS,
        unit="ratio",
        optimal_range=Range(max=0.75),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="(TC - HDL) / TC",
    ),
    # Metabolic panel
    BiomarkerReference(
        id="glucose",
        name="Fasting Glucose",
        category=Category.METABOLIC,
        unit="mg/dL",
        standard_range=Range(min=65, max=99),
        optimal_range=Range(min=80, max=90),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="hba1c",
        name="HbA1c",
        category=Category.METABOLIC,
        unit="%",
        standard_range=Range(max=5.69),
        optimal_range=Range(min=4.5, max=5.25),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="fastingInsulin",
        name="Fasting Insulin",
        category=Category.METABOLIC,
        unit="μU/mL",
        standard_range=Range(min=2, max=25),
        optimal_range=Range(min=2, max=5),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="cPeptide",
        name="C-peptide",
        category=Category.METABOLIC,
        unit="ng/mL",
        standard_range=Range(min=0.8, max=3.85),
        optimal_range=Range(min=1.0, max=2.5),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="fructosamine",
        name="Fructosamine",
        category=Category.METABOLIC,
        unit="μmol/L",
        standard_range=Range(min=190, max=285),
        optimal_range=Range(min=190, max=250),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="uricAcidHdlRatio",
        name="Uric Acid/HDL Ratio",
        category=Category.METABOLIC,
        unit="ratio",
        optimal_range=Range(max=0.10),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="uricAcid / hdl",
    ),
    BiomarkerReference(
        id="eagMgDl",
        name="eAG (Estimated Average Glucose)",
        category=Category.METABOLIC,
        unit="mg/dL",
        standard_range=Range(max=117),
        optimal_range=Range(max=100),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="eagMmolL",
        name="eAG (mmol/L)",
        category=Category.METABOLIC,
        unit="mmol/L",
        standard_range=Range(max=6.5),
        optimal_range=Range(max=5.6),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="sodium",
        name="Sodium",
        category=Category.METABOLIC,
        unit="mEq/L",
        standard_range=Range(min=136, max=145),
        optimal_range=Range(min=138, max=142),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="potassium",
        name="Potassium",
        category=Category.METABOLIC,
        unit="mEq/L",
        standard_range=Range(min=3.5, max=5.0),
        optimal_range=Range(min=4.0, max=4.5),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="chloride",
        name="Chloride",
        category=Category.METABOLIC,
        unit="mEq/L",
        standard_range=Range(min=98, max=106),
        optimal_range=Range(min=100, max=104),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="co2",
        name="CO2 (Bicarbonate)",
        category=Category.METABOLIC,
        unit="mEq/L",
        standard_range=Range(min=23, max=29),
        optimal_range=Range(min=24, max=28),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="calcium",
        name="Calcium",
        category=Category.METABOLIC,
        unit="mg/dL",
        standard_range=Range(min=8.5, max=10.5),
        optimal_range=Range(min=9.0, max=10.0),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="correctedCalcium",
        name="Corrected Calcium",
        category=Category.METABOLIC,
        unit="mg/dL",
        standard_range=Range(min=8.5, max=10.5),
        optimal_range=Range(min=9.0, max=10.0),
        direction=Direction.MID_RANGE,
        is_calculated=True,
        formula="Ca + 0.8 × (4.0 − Albumin)",
    ),
    # Insulin sensitivity
    BiomarkerReference(
        id="homaIr",
        name="HOMA-IR",
        category=Category.INSULIN_CALCS,
        unit="index",
        optimal_range=Range(max=1.0),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="(fastingInsulin * glucose) / 405",
    ),
    BiomarkerReference(
        id="quicki",
        name="QUICKI",
        category=Category.INSULIN_CALCS,
        unit="index",
        optimal_range=Range(min=0.35),
        direction=Direction.HIGHER,
        is_calculated=True,
        formula="1 / (log10(fastingInsulin) + log10(glucose))",
    ),
    BiomarkerReference(
        id="tygIndex",
        name="TyG Index",
        category=Category.INSULIN_CALCS,
        unit="index",
        optimal_range=Range(max=8.5),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="ln((triglycerides * glucose) / 2)",
    ),
    # Liver function
    BiomarkerReference(
        id="ast",
        name="AST",
        category=Category.LIVER,
        unit="U/L",
        standard_range=Range(min=10, max=40),
        optimal_range=Range(max=20),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="alt",
        name="ALT",
        category=Category.LIVER,
        unit="U/L",
        standard_range=Range(max=45),
        optimal_range=Range(max=20),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="ggt",
        name="GGT",
        category=Category.LIVER,
        unit="U/L",
        standard_range=Range(max=50),
        optimal_range=Range(max=25),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="alkalinePhosphatase",
        name="Alkaline Phosphatase",
        category=Category.LIVER,
        unit="U/L",
        standard_range=Range(min=45, max=115),
        optimal_range=Range(min=44, max=100),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="totalBilirubin",
        name="Total Bilirubin",
        category=Category.LIVER,
        unit="mg/dL",
        standard_range=Range(min=0.1, max=1.2),
        optimal_range=Range(min=0.1, max=1.0),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="albumin",
        name="Albumin",
        category=Category.LIVER,
        unit="g/dL",
        standard_range=Range(min=3.5, max=5.0),
        optimal_range=Range(min=4.0, max=5.0),
        direction=Direction.HIGHER,
    ),
    BiomarkerReference(
        id="agRatio",
        name="A/G Ratio",
        category=Category.LIVER,
        unit="ratio",
        standard_range=Range(min=1.0, max=2.0),
        optimal_range=Range(min=1.2, max=2.0),
        direction=Direction.HIGHER,
    ),
    BiomarkerReference(
        id="deRitisRatio",
        name="AST:ALT (De Ritis Ratio)",
        category=Category.LIVER,
        unit="ratio",
        optimal_range=Range(min=0.8, max=1.2),
        direction=Direction.MID_RANGE,
        is_calculated=True,
        formula="ast / alt",
    ),
    BiomarkerReference(
        id="bilirubinAlbuminRatio",
        name="Bilirubin/Albumin Ratio",
        category=Category.LIVER,
        unit="ratio",
        optimal_range=Range(max=0.25),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="totalBilirubin / albumin",
    ),
    BiomarkerReference(
        id="indirectDirectBilirubin",
        name="Indirect/Direct Bilirubin Ratio",
        category=Category.LIVER,
        unit="ratio",
        optimal_range=Range(min=3, max=5),
        direction=Direction.MID_RANGE,
        is_calculated=True,
        formula="indirectBilirubin / directBilirubin",
    ),
    BiomarkerReference(
        id="directBilirubin",
        name="Direct Bilirubin",
        category=Category.LIVER,
        unit="mg/dL",
        standard_range=Range(max=0.3),
        optimal_range=Range(max=0.2),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="indirectBilirubin",
        name="Indirect Bilirubin",
        category=Category.LIVER,
        unit="mg/dL",
        standard_range=Range(min=0.1, max=0.9),
        optimal_range=Range(min=0.1, max=0.8),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="totalProtein",
        name="Total Protein",
        category=Category.LIVER,
        unit="g/dL",
        standard_range=Range(min=6.0, max=8.3),
        optimal_range=Range(min=6.5, max=7.5),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="globulin",
        name="Globulin",
        category=Category.LIVER,
        unit="g/dL",
        standard_range=Range(min=2.0, max=3.5),
        optimal_range=Range(min=2.3, max=3.0),
        direction=Direction.MID_RANGE,
    ),
    # Kidney function
    BiomarkerReference(
        id="creatinine",
        name="Creatinine",
        category=Category.KIDNEY,
        unit="mg/dL",
        standard_range=Range(min=0.7, max=1.3),
        optimal_range=Range(min=0.8, max=1.2),
        direction=Direction.CONTEXT,
        male_optimal=Range(min=0.8, max=1.2),
        female_optimal=Range(min=0.6, max=1.0),
    ),
    BiomarkerReference(
        id="bun",
        name="BUN",
        category=Category.KIDNEY,
        unit="mg/dL",
        standard_range=Range(min=6, max=24),
        optimal_range=Range(min=10, max=16),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="egfr",
        name="eGFR",
        category=Category.KIDNEY,
        unit="mL/min/1.73m²",
        standard_range=Range(min=60),
        optimal_range=Range(min=90),
        direction=Direction.HIGHER,
    ),
    BiomarkerReference(
        id="cystatinC",
        name="Cystatin C",
        category=Category.KIDNEY,
        unit="mg/L",
        standard_range=Range(min=0.5, max=1.0),
        optimal_range=Range(min=0.6, max=0.9),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="bunCreatinineRatio",
        name="BUN/Creatinine Ratio",
        category=Category.KIDNEY,
        unit="ratio",
        standard_range=Range(min=10, max=20),
        optimal_range=Range(min=12, max=16),
        direction=Direction.MID_RANGE,
        is_calculated=True,
        formula="bun / creatinine",
    ),
    BiomarkerReference(
        id="uricAcid",
        name="Uric Acid",
        category=Category.KIDNEY,
        unit="mg/dL",
        standard_range=Range(min=3.4, max=7.0),
        optimal_range=Range(max=5.0),
        direction=Direction.LOWER,
        male_optimal=Range(max=5.0),
        female_optimal=Range(max=4.0),
    ),
    # Complete blood count
    BiomarkerReference(
        id="rbc",
        name="RBC",
        category=Category.CBC,
        unit="million/µL",
        standard_range=Range(min=4.6, max=6.2),
        optimal_range=Range(min=4.4, max=4.9),
        direction=Direction.MID_RANGE,
        male_optimal=Range(min=4.4, max=4.9),
        female_optimal=Range(min=4.0, max=4.5),
    ),
    BiomarkerReference(
        id="wbc",
        name="WBC",
        category=Category.CBC,
        unit="×10⁹/L",
        standard_range=Range(min=4.5, max=11.0),
        optimal_range=Range(min=5.0, max=8.0),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="hemoglobin",
        name="Hemoglobin",
        category=Category.CBC,
        unit="g/dL",
        standard_range=Range(min=13.8, max=17.2),
        optimal_range=Range(min=14.0, max=15.0),
        direction=Direction.MID_RANGE,
        male_optimal=Range(min=14.0, max=15.0),
        female_optimal=Range(min=13.5, max=14.5),
    ),
    BiomarkerReference(
        id="hematocrit",
        name="Hematocrit",
        category=Category.CBC,
        unit="%",
        standard_range=Range(min=40, max=54),
        optimal_range=Range(min=39, max=45),
        direction=Direction.MID_RANGE,
        male_optimal=Range(min=39, max=45),
        female_optimal=Range(min=37, max=44),
    ),
    BiomarkerReference(
        id="mcv",
        name="MCV",
        category=Category.CBC,
        unit="fL",
        standard_range=Range(min=80, max=100),
        optimal_range=Range(min=85, max=92),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="rdw",
        name="RDW",
        category=Category.CBC,
        unit="%",
        standard_range=Range(min=11.5, max=15.4),
        optimal_range=Range(min=11.5, max=13.0),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="platelets",
        name="Platelets",
        category=Category.CBC,
        unit="×10⁹/L",
        standard_range=Range(min=150, max=400),
        optimal_range=Range(min=175, max=250),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="mpv",
        name="MPV",
        category=Category.CBC,
        unit="fL",
        standard_range=Range(min=7.5, max=11.5),
        optimal_range=Range(min=7.5, max=10.5),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="neutrophils",
        name="Neutrophils (Absolute)",
        category=Category.CBC,
        unit="×10⁹/L",
        standard_range=Range(min=1.5, max=8.0),
        optimal_range=Range(min=2.0, max=7.0),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="lymphocytes",
        name="Lymphocytes (Absolute)",
        category=Category.CBC,
        unit="×10⁹/L",
        standard_range=Range(min=1.0, max=4.8),
        optimal_range=Range(min=1.5, max=3.5),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="monocytes",
        name="Monocytes (Absolute)",
        category=Category.CBC,
        unit="×10⁹/L",
        standard_range=Range(min=0.2, max=0.8),
        optimal_range=Range(min=0.2, max=0.6),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="lymphocytePercent",
        name="Lymphocytes %",
        category=Category.CBC,
        unit="%",
        standard_range=Range(min=20, max=40),
        optimal_range=Range(min=25, max=35),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="neutrophilPercent",
        name="Neutrophils %",
        category=Category.CBC,
        unit="%",
        standard_range=Range(min=40, max=70),
        optimal_range=Range(min=45, max=65),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="monocytePercent",
        name="Monocytes %",
        category=Category.CBC,
        unit="%",
        standard_range=Range(min=2, max=8),
        optimal_range=Range(min=3, max=7),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="eosinophils",
        name="Eosinophils",
        category=Category.CBC,
        unit="×10⁹/L",
        standard_range=Range(min=0, max=0.5),
        optimal_range=Range(min=0, max=0.3),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="basophils",
        name="Basophils",
        category=Category.CBC,
        unit="×10⁹/L",
        standard_range=Range(min=0, max=0.2),
        optimal_range=Range(min=0, max=0.1),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="mch",
        name="MCH",
        category=Category.CBC,
        unit="pg",
        standard_range=Range(min=27, max=33),
        optimal_range=Range(min=28, max=32),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="mchc",
        name="MCHC",
        category=Category.CBC,
        unit="g/dL",
        standard_range=Range(min=32, max=36),
        optimal_range=Range(min=33, max=35),
        direction=Direction.MID_RANGE,
    ),
    # Iron panel
    BiomarkerReference(
        id="ferritin",
        name="Ferritin",
        category=Category.IRON,
        unit="ng/mL",
        standard_range=Range(min=12, max=300),
        optimal_range=Range(min=50, max=150),
        direction=Direction.MID_RANGE,
        male_optimal=Range(min=50, max=150),
        female_optimal=Range(min=40, max=70),
    ),
    BiomarkerReference(
        id="serumIron",
        name="Serum Iron",
        category=Category.IRON,
        unit="µg/dL",
        standard_range=Range(min=59, max=158),
        optimal_range=Range(min=85, max=130),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="tibc",
        name="TIBC",
        category=Category.IRON,
        unit="µg/dL",
        standard_range=Range(min=250, max=450),
        optimal_range=Range(min=250, max=350),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="ironSaturation",
        name="Iron Saturation",
        category=Category.IRON,
        unit="%",
        standard_range=Range(min=20, max=50),
        optimal_range=Range(min=20, max=35),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="transferrin",
        name="Transferrin",
        category=Category.IRON,
        unit="mg/dL",
        standard_range=Range(min=200, max=360),
        optimal_range=Range(min=200, max=300),
        direction=Direction.MID_RANGE,
    ),
    # CBC inflammation ratios
    BiomarkerReference(
        id="nlr",
        name="NLR (Neutrophil-to-Lymphocyte)",
        category=Category.CBC_RATIOS,
        unit="ratio",
        optimal_range=Range(min=1.2, max=2.0),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="neutrophils / lymphocytes (absolute)",
    ),
    BiomarkerReference(
        id="plr",
        name="PLR (Platelet-to-Lymphocyte)",
        category=Category.CBC_RATIOS,
        unit="ratio",
        optimal_range=Range(max=135),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="platelets / lymphocytes (absolute)",
    ),
    BiomarkerReference(
        id="mlr",
        name="MLR (Monocyte-to-Lymphocyte)",
        category=Category.CBC_RATIOS,
        unit="ratio",
        optimal_range=Range(max=0.25),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="monocytes / lymphocytes (absolute)",
    ),
    BiomarkerReference(
        id="sii",
        name="SII (Systemic Immune-Inflammation Index)",
        category=Category.CBC_RATIOS,
        unit="index",
        optimal_range=Range(min=200, max=500),
        direction=Direction.MID_RANGE,
        is_calculated=True,
        formula="(platelets * neutrophils) / lymphocytes",
    ),
    BiomarkerReference(
        id="siri",
        name="SIRI (Systemic Inflammation Response Index)",
        category=Category.CBC_RATIOS,
        unit="index",
        optimal_range=Range(max=1.0),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="(monocytes * neutrophils) / lymphocytes",
    ),
    BiomarkerReference(
        id="lmr",
        name="LMR (Lymphocyte-to-Monocyte)",
        category=Category.CBC_RATIOS,
        unit="ratio",
        optimal_range=Range(min=4.0),
        direction=Direction.HIGHER,
        is_calculated=True,
        formula="lymphocytes / monocytes",
    ),
    BiomarkerReference(
        id="pwr",
        name="PWR (Platelet-to-WBC)",
        category=Category.CBC_RATIOS,
        unit="ratio",
        optimal_range=Range(min=20, max=40),
        direction=Direction.MID_RANGE,
        is_calculated=True,
        formula="platelets / wbc",
    ),
    BiomarkerReference(
        id="mhr",
        name="MHR (Monocyte-to-HDL)",
        category=Category.CBC_RATIOS,
        unit="ratio",
        optimal_range=Range(max=0.01),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="monocytes / hdl",
    ),
    BiomarkerReference(
        id="nhr",
        name="NHR (Neutrophil-to-HDL)",
        category=Category.CBC_RATIOS,
        unit="ratio",
        optimal_range=Range(max=0.06),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="neutrophils / hdl",
    ),
    BiomarkerReference(
        id="ggtHdlRatio",
        name="GGT/HDL Ratio",
        category=Category.CBC_RATIOS,
        unit="ratio",
        optimal_range=Range(max=0.5),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="ggt / hdl",
    ),
    BiomarkerReference(
        id="car",
        name="CAR (CRP-to-Albumin)",
        category=Category.CBC_RATIOS,
        unit="ratio",
        optimal_range=Range(max=0.25),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="crp / albumin",
    ),
    BiomarkerReference(
        id="ferritinAlbuminRatio",
        name="Ferritin/Albumin Ratio",
        category=Category.CBC_RATIOS,
        unit="ratio",
        optimal_range=Range(max=30),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="ferritin / albumin",
    ),
    BiomarkerReference(
        id="rdwMcvRatio",
        name="RDW/MCV Ratio",
        category=Category.CBC_RATIOS,
        unit="ratio",
        optimal_range=Range(max=0.15),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="rdw / mcv",
    ),
    BiomarkerReference(
        id="nlpr",
        name="NLPR (NLR-Platelet Ratio)",
        category=Category.CBC_RATIOS,
        unit="ratio",
        optimal_range=Range(max=0.8),
        direction=Direction.LOWER,
        is_calculated=True,
        formula="NLR / (platelets / 100)",
    ),
    # Thyroid panel
    BiomarkerReference(
        id="tsh",
        name="TSH",
        category=Category.THYROID,
        unit="mIU/L",
        standard_range=Range(min=0.45, max=4.5),
        optimal_range=Range(min=1.0, max=2.5),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="freeT4",
        name="Free T4",
        category=Category.THYROID,
        unit="ng/dL",
        standard_range=Range(min=0.82, max=1.76),
        optimal_range=Range(min=1.1, max=1.6),
        direction=Direction.HIGHER,
    ),
    BiomarkerReference(
        id="freeT3",
        name="Free T3",
        category=Category.THYROID,
        unit="pg/mL",
        standard_range=Range(min=2.0, max=4.4),
        optimal_range=Range(min=3.2, max=4.2),
        direction=Direction.HIGHER,
    ),
    BiomarkerReference(
        id="reverseT3",
        name="Reverse T3",
        category=Category.THYROID,
        unit="ng/dL",
        standard_range=Range(min=9, max=27),
        optimal_range=Range(min=10, max=20),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="tpoAntibodies",
        name="TPO Antibodies",
        category=Category.THYROID,
        unit="IU/mL",
        standard_range=Range(max=34),
        optimal_range=Range(max=9),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="tgAb",
        name="Thyroglobulin Antibodies",
        category=Category.THYROID,
        unit="IU/mL",
        standard_range=Range(max=40),
        optimal_range=Range(max=1),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="ft3Rt3Ratio",
        name="FT3/rT3 Ratio",
        category=Category.THYROID,
        unit="ratio",
        optimal_range=Range(min=0.20),
        direction=Direction.HIGHER,
        is_calculated=True,
        formula="freeT3 / reverseT3",
    ),
    BiomarkerReference(
        id="t3Uptake",
        name="T3 Uptake",
        category=Category.THYROID,
        unit="%",
        standard_range=Range(min=22, max=35),
        optimal_range=Range(min=24, max=32),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="totalT4",
        name="Total T4",
        category=Category.THYROID,
        unit="mcg/dL",
        standard_range=Range(min=4.5, max=12.5),
        optimal_range=Range(min=6, max=10),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="freeT4Index",
        name="Free T4 Index",
        category=Category.THYROID,
        unit="index",
        standard_range=Range(min=1.4, max=3.8),
        optimal_range=Range(min=1.5, max=4.5),
        direction=Direction.MID_RANGE,
    ),
    # Inflammation
    BiomarkerReference(
        id="crp",
        name="hs-CRP",
        category=Category.INFLAMMATION,
        unit="mg/L",
        standard_range=Range(max=3.0),
        optimal_range=Range(max=0.5),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="esr",
        name="ESR",
        category=Category.INFLAMMATION,
        unit="mm/hr",
        standard_range=Range(max=20),
        optimal_range=Range(max=10),
        direction=Direction.LOWER,
        male_optimal=Range(max=10),
        female_optimal=Range(max=15),
    ),
    BiomarkerReference(
        id="homocysteine",
        name="Homocysteine",
        category=Category.INFLAMMATION,
        unit="µmol/L",
        standard_range=Range(min=5, max=15),
        optimal_range=Range(max=7),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="fibrinogen",
        name="Fibrinogen",
        category=Category.INFLAMMATION,
        unit="mg/dL",
        standard_range=Range(min=200, max=400),
        optimal_range=Range(min=200, max=300),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="il6",
        name="IL-6",
        category=Category.INFLAMMATION,
        unit="pg/mL",
        standard_range=Range(max=5),
        optimal_range=Range(max=2),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="tnfAlpha",
        name="TNF-alpha",
        category=Category.INFLAMMATION,
        unit="pg/mL",
        standard_range=Range(max=8.1),
        optimal_range=Range(max=2),
        direction=Direction.LOWER,
    ),
    # Vitamins
    BiomarkerReference(
        id="vitaminD",
        name="Vitamin D (25-OH)",
        category=Category.VITAMINS,
        unit="ng/mL",
        standard_range=Range(min=30, max=100),
        optimal_range=Range(min=40, max=60),
        direction=Direction.HIGHER,
    ),
    BiomarkerReference(
        id="vitaminB12",
        name="Vitamin B12",
        category=Category.VITAMINS,
        unit="pg/mL",
        standard_range=Range(min=200, max=900),
        optimal_range=Range(min=450, max=2000),
        direction=Direction.HIGHER,
    ),
    BiomarkerReference(
        id="folate",
        name="Folate",
        category=Category.VITAMINS,
        unit="ng/mL",
        standard_range=Range(min=3, max=20),
        optimal_range=Range(min=8),
        direction=Direction.HIGHER,
    ),
    BiomarkerReference(
        id="mma",
        name="MMA (B12 Functional)",
        category=Category.VITAMINS,
        unit="nmol/L",
        standard_range=Range(min=70, max=378),
        optimal_range=Range(max=260),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="vitaminB6",
        name="Vitamin B6",
        category=Category.VITAMINS,
        unit="ng/mL",
        standard_range=Range(min=5, max=50),
        optimal_range=Range(min=20, max=50),
        direction=Direction.HIGHER,
    ),
    # Minerals and fatty acids
    BiomarkerReference(
        id="magnesiumRbc",
        name="Magnesium RBC",
        category=Category.MINERALS,
        unit="mg/dL",
        standard_range=Range(min=4.2, max=6.8),
        optimal_range=Range(min=5.5, max=6.5),
        direction=Direction.HIGHER,
    ),
    BiomarkerReference(
        id="magnesiumSerum",
        name="Serum Magnesium",
        category=Category.MINERALS,
        unit="mg/dL",
        standard_range=Range(min=1.7, max=2.4),
        optimal_range=Range(min=2.0),
        direction=Direction.HIGHER,
    ),
    BiomarkerReference(
        id="zinc",
        name="Zinc",
        category=Category.MINERALS,
        unit="µg/dL",
        standard_range=Range(min=60, max=130),
        optimal_range=Range(min=80, max=120),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="selenium",
        name="Selenium",
        category=Category.MINERALS,
        unit="µg/L",
        standard_range=Range(min=70, max=150),
        optimal_range=Range(min=110, max=150),
        direction=Direction.HIGHER,
    ),
    BiomarkerReference(
        id="copper",
        name="Copper",
        category=Category.MINERALS,
        unit="µg/dL",
        standard_range=Range(min=70, max=140),
        optimal_range=Range(min=80, max=120),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="copperZincRatio",
        name="Copper/Zinc Ratio",
        category=Category.MINERALS,
        unit="ratio",
        optimal_range=Range(min=0.7, max=1.0),
        direction=Direction.MID_RANGE,
        is_calculated=True,
        formula="copper / zinc",
    ),
    BiomarkerReference(
        id="omega3Index",
        name="Omega-3 Index",
        category=Category.MINERALS,
        unit="%",
        standard_range=Range(min=4, max=5),
        optimal_range=Range(min=8, max=12),
        direction=Direction.HIGHER,
    ),
    BiomarkerReference(
        id="omega6Omega3Ratio",
        name="Omega-6/Omega-3 Ratio",
        category=Category.MINERALS,
        unit="ratio",
        standard_range=Range(min=15, max=20),
        optimal_range=Range(min=2, max=4),
        direction=Direction.LOWER,
    ),
    # Male hormones
    BiomarkerReference(
        id="testosteroneEstradiolRatio",
        name="Testosterone/Estradiol Ratio",
        category=Category.MALE_HORMONES,
        unit="ratio",
        optimal_range=Range(min=10, max=20),
        direction=Direction.MID_RANGE,
        is_calculated=True,
        formula="totalTestosterone / estradiol",
    ),
    BiomarkerReference(
        id="bioavailableTestosterone",
        name="Bioavailable Testosterone",
        category=Category.MALE_HORMONES,
        unit="ng/dL",
        standard_range=Range(min=130, max=680),
        optimal_range=Range(min=250, max=500),
        direction=Direction.HIGHER,
    ),
    BiomarkerReference(
        id="totalTestosterone",
        name="Total Testosterone",
        category=Category.MALE_HORMONES,
        unit="ng/dL",
        standard_range=Range(min=250, max=1100),
        optimal_range=Range(min=400, max=700),
        direction=Direction.HIGHER,
    ),
    BiomarkerReference(
        id="freeTestosterone",
        name="Free Testosterone",
        category=Category.MALE_HORMONES,
        unit="pg/mL",
        standard_range=Range(min=35, max=155),
        optimal_range=Range(min=100, max=155),
        direction=Direction.HIGHER,
    ),
    BiomarkerReference(
        id="shbg",
        name="SHBG",
        category=Category.MALE_HORMONES,
        unit="nmol/L",
        standard_range=Range(min=10, max=57),
        optimal_range=Range(min=20, max=40),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="estradiolMale",
        name="Estradiol (Male)",
        category=Category.MALE_HORMONES,
        unit="pg/mL",
        standard_range=Range(min=10, max=40),
        optimal_range=Range(min=20, max=30),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="dheas",
        name="DHEA-S",
        category=Category.MALE_HORMONES,
        unit="µg/dL",
        standard_range=Range(min=160, max=449),
        optimal_range=Range(min=300, max=450),
        direction=Direction.HIGHER,
    ),
    BiomarkerReference(
        id="cortisolAm",
        name="Cortisol (AM)",
        category=Category.MALE_HORMONES,
        unit="µg/dL",
        standard_range=Range(min=6, max=23),
        optimal_range=Range(min=10, max=18),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="igf1",
        name="IGF-1",
        category=Category.MALE_HORMONES,
        unit="ng/mL",
        standard_range=Range(min=101, max=267),
        optimal_range=Range(max=175),
        direction=Direction.CONTEXT,
    ),
    BiomarkerReference(
        id="prolactin",
        name="Prolactin",
        category=Category.MALE_HORMONES,
        unit="ng/mL",
        standard_range=Range(min=2, max=18),
        optimal_range=Range(max=10),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="lh",
        name="LH",
        category=Category.MALE_HORMONES,
        unit="mIU/mL",
        standard_range=Range(min=1.5, max=9.3),
        optimal_range=Range(min=2, max=8),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="fsh",
        name="FSH",
        category=Category.MALE_HORMONES,
        unit="mIU/mL",
        standard_range=Range(min=1.5, max=12.4),
        optimal_range=Range(min=1, max=8),
        direction=Direction.MID_RANGE,
    ),
    BiomarkerReference(
        id="freeAndrogenIndex",
        name="Free Androgen Index",
        category=Category.MALE_HORMONES,
        unit="index",
        standard_range=Range(min=30, max=150),
        optimal_range=Range(min=40, max=80),
        direction=Direction.MID_RANGE,
        is_calculated=True,
        formula="(totalTestosterone [nmol/L] * 100) / shbg",
    ),
    BiomarkerReference(
        id="estradiol",
        name="Estradiol",
        category=Category.MALE_HORMONES,
        unit="pg/mL",
        standard_range=Range(min=10, max=40),
        optimal_range=Range(min=20, max=30),
        direction=Direction.MID_RANGE,
    ),
    # Female hormones
    BiomarkerReference(
        id="estradiolFollicular",
        name="Estradiol (Follicular)",
        category=Category.FEMALE_HORMONES,
        unit="pg/mL",
        standard_range=Range(min=20, max=150),
        direction=Direction.CONTEXT,
    ),
    BiomarkerReference(
        id="progesteroneLuteal",
        name="Progesterone (Luteal)",
        category=Category.FEMALE_HORMONES,
        unit="ng/mL",
        standard_range=Range(min=5, max=20),
        optimal_range=Range(min=10),
        direction=Direction.HIGHER,
    ),
    BiomarkerReference(
        id="amh",
        name="AMH",
        category=Category.FEMALE_HORMONES,
        unit="ng/mL",
        direction=Direction.HIGHER,
    ),
    # Advanced cardiovascular
    BiomarkerReference(
        id="lpPla2",
        name="Lp-PLA2 (PLAC)",
        category=Category.CARDIOVASCULAR,
        unit="ng/mL",
        standard_range=Range(max=200),
        optimal_range=Range(max=200),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="mpo",
        name="MPO (Myeloperoxidase)",
        category=Category.CARDIOVASCULAR,
        unit="pmol/L",
        standard_range=Range(max=480),
        optimal_range=Range(max=420),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="tmao",
        name="TMAO",
        category=Category.CARDIOVASCULAR,
        unit="µmol/L",
        standard_range=Range(max=4.6),
        optimal_range=Range(max=2.5),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="ntProBnp",
        name="NT-proBNP",
        category=Category.CARDIOVASCULAR,
        unit="pg/mL",
        standard_range=Range(max=125),
        optimal_range=Range(max=125),
        direction=Direction.LOWER,
    ),
    BiomarkerReference(
        id="glycA",
        name="GlycA",
        category=Category.CARDIOVASCULAR,
        unit="µmol/L",
        standard_range=Range(min=300, max=500),
        direction=Direction.LOWER,
    ),
]

BIOMARKER_REFERENCES = MappingProxyType({ref.id: ref for ref in _REFERENCES})

# Lowercase lab-report names and abbreviations -> canonical ids
BIOMARKER_ID_ALIASES = MappingProxyType({
    "e2": "estradiol", "oestradiol": "estradiol",
    "rbc count": "rbc", "red blood cell count": "rbc", "red blood cells": "rbc",
    "wbc count": "wbc", "white blood cell count": "wbc", "white blood cells": "wbc",
    "hgb": "hemoglobin",
    "hct": "hematocrit",
    "plt": "platelets", "platelet count": "platelets",
    "ldl-c": "ldl", "ldl cholesterol": "ldl", "ldl-cholesterol": "ldl",
    "ldl chol calc": "ldl",
    "hdl-c": "hdl", "hdl cholesterol": "hdl",
    "total chol": "totalCholesterol", "tc": "totalCholesterol",
    "total cholesterol": "totalCholesterol", "cholesterol, total": "totalCholesterol",
    "cholesterol": "totalCholesterol",
    "tg": "triglycerides", "trigs": "triglycerides",
    "free t4": "freeT4", "t4 free": "freeT4", "t4, free": "freeT4", "ft4": "freeT4",
    "free t3": "freeT3", "t3 free": "freeT3", "t3, free": "freeT3", "ft3": "freeT3",
    "sgot": "ast", "aspartate aminotransferase": "ast",
    "sgpt": "alt", "alanine aminotransferase": "alt",
    "alk phos": "alkalinePhosphatase", "alkaline phosphatase": "alkalinePhosphatase",
    "alp": "alkalinePhosphatase",
    "hs-crp": "crp", "hscrp": "crp", "c-reactive protein": "crp", "hs crp": "crp",
    "high sensitivity crp": "crp",
    "vit d": "vitaminD", "25-oh vitamin d": "vitaminD", "vitamin d": "vitaminD",
    "vitamin d, 25-oh": "vitaminD", "vitamin d,25-oh,total,ia": "vitaminD",
    "25-hydroxyvitamin d": "vitaminD",
    "apolipoprotein b": "apoB", "apob": "apoB", "apo b": "apoB",
    "lp(a)": "lpa", "lipoprotein(a)": "lpa", "lipoprotein a": "lpa",
    "vldl cholesterol": "vldl",
    "glucose, fasting": "glucose", "fasting glucose": "glucose",
    "glucose, serum": "glucose",
    "hemoglobin a1c": "hba1c", "glycohemoglobin": "hba1c", "a1c": "hba1c",
    "insulin": "fastingInsulin", "fasting insulin": "fastingInsulin",
    "c-peptide": "cPeptide", "c peptide": "cPeptide",
    "gamma gt": "ggt", "gamma-glutamyl transferase": "ggt",
    "bilirubin": "totalBilirubin", "total bilirubin": "totalBilirubin",
    "bilirubin, total": "totalBilirubin",
    "total protein": "totalProtein", "protein, total": "totalProtein",
    "protein total": "totalProtein",
    "blood urea nitrogen": "bun", "urea nitrogen": "bun", "urea nitrogen (bun)": "bun",
    "gfr": "egfr", "estimated gfr": "egfr",
    "cystatin c": "cystatinC",
    "uric acid": "uricAcid",
    "mean cell volume": "mcv", "mean corpuscular volume": "mcv",
    "mean cell hemoglobin": "mch", "mean corpuscular hemoglobin": "mch",
    "mean cell hemoglobin concentration": "mchc",
    "red cell distribution width": "rdw",
    "mean platelet volume": "mpv",
    "neutrophil count": "neutrophils", "absolute neutrophils": "neutrophils",
    "anc": "neutrophils", "neutrophils (absolute)": "neutrophils",
    "neutrophils %": "neutrophilPercent", "neutrophil %": "neutrophilPercent",
    "lymphocyte count": "lymphocytes", "absolute lymphocytes": "lymphocytes",
    "alc": "lymphocytes", "lymphocytes (absolute)": "lymphocytes",
    "lymphocytes %": "lymphocytePercent", "lymphocyte %": "lymphocytePercent",
    "monocyte count": "monocytes", "absolute monocytes": "monocytes",
    "monocytes (absolute)": "monocytes",
    "monocytes %": "monocytePercent", "monocyte %": "monocytePercent",
    "eosinophil count": "eosinophils", "absolute eosinophils": "eosinophils",
    "eosinophils absolute": "eosinophils",
    "basophil count": "basophils", "absolute basophils": "basophils",
    "basophils absolute": "basophils",
    "iron": "serumIron", "serum iron": "serumIron", "iron, total": "serumIron",
    "iron total": "serumIron", "total iron": "serumIron",
    "total iron binding capacity": "tibc", "iron binding capacity": "tibc",
    "iron bind.cap.(tibc)": "tibc",
    "iron saturation": "ironSaturation", "% saturation": "ironSaturation",
    "thyroid stimulating hormone": "tsh",
    "reverse t3": "reverseT3", "rt3": "reverseT3",
    "tpo antibodies": "tpoAntibodies", "thyroid peroxidase ab": "tpoAntibodies",
    "sed rate": "esr", "erythrocyte sedimentation rate": "esr",
    "vitamin b12": "vitaminB12", "b12": "vitaminB12",
    "folic acid": "folate",
    "vitamin b6": "vitaminB6",
    "magnesium": "magnesiumSerum", "magnesium, serum": "magnesiumSerum",
    "magnesium rbc": "magnesiumRbc",
    "carbon dioxide": "co2", "bicarbonate": "co2",
    "testosterone": "totalTestosterone", "total testosterone": "totalTestosterone",
    "testosterone, total, ms": "totalTestosterone",
    "testosterone total ms": "totalTestosterone",
    "free testosterone": "freeTestosterone", "testosterone, free": "freeTestosterone",
    "sex hormone binding globulin": "shbg",
    "dhea-s": "dheas", "dhea sulfate": "dheas", "dhea-sulfate": "dheas",
    "cortisol": "cortisolAm", "cortisol, am": "cortisolAm",
    "cortisol, total": "cortisolAm", "cortisol total": "cortisolAm",
    "igf-1": "igf1",
    "luteinizing hormone": "lh",
    "follicle stimulating hormone": "fsh",
    "anti-mullerian hormone": "amh",
    "t3 uptake": "t3Uptake",
    "t4 (thyroxine), total": "totalT4", "t4, total": "totalT4",
    "thyroxine, total": "totalT4", "t4 thyroxine total": "totalT4",
    "free t4 index (t7)": "freeT4Index", "free t4 index": "freeT4Index",
    "t7": "freeT4Index",
    "testosterone, bioavailable": "bioavailableTestosterone",
    "bioavailable testosterone": "bioavailableTestosterone",
    "chol/hdlc ratio": "tcHdlRatio", "cholesterol/hdl ratio": "tcHdlRatio",
    "ldl/hdl ratio": "ldlHdlRatio",
    "non hdl cholesterol": "nonHdlC", "non-hdl cholesterol": "nonHdlC",
    "non hdl-c": "nonHdlC",
    "albumin/globulin ratio": "agRatio", "a/g ratio": "agRatio", "ag ratio": "agRatio",
    "eag (mg/dl)": "eagMgDl", "eag mg/dl": "eagMgDl",
    "eag (mmol/l)": "eagMmolL", "eag mmol/l": "eagMmolL",
    "bilirubin, direct": "directBilirubin", "direct bilirubin": "directBilirubin",
    "bilirubin, indirect": "indirectBilirubin",
    "indirect bilirubin": "indirectBilirubin",
})
