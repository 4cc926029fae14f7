from troubleshooting_guide.domain.models import DecisionNode, DecisionOption, DecisionTree, Device

# ==============================================================================
# DEVICES
# ==============================================================================

HARDCODED_DEVICES = [
    Device(
        id="hair-dryer-pro-2024",
        name="Hair Dryer Pro 2024",
        model="HD-2024-PRO",
        core_device="Hair Dryer",
        brand_name="L'Oréal",
        image_url="https://images.pexels.com/photos/3993449/pexels-photo-3993449.jpeg?auto=compress&cs=tinysrgb&w=300&h=200&fit=crop",
    ),
    Device(
        id="straightener-elite-x1",
        name="Straightener Elite X1",
        model="SE-X1-ELITE",
        core_device="Hair Straightener",
        brand_name="L'Oréal",
        image_url="https://images.pexels.com/photos/3373736/pexels-photo-3373736.jpeg?auto=compress&cs=tinysrgb&w=300&h=200&fit=crop",
    ),
    Device(
        id="curling-iron-deluxe",
        name="Curling Iron Deluxe",
        model="CI-DLX-2024",
        core_device="Curling Iron",
        brand_name="L'Oréal",
    ),
    Device(
        id="facial-steamer-spa",
        name="Facial Steamer Spa",
        model="FS-SPA-PRO",
        core_device="Facial Steamer",
        brand_name="L'Oréal",
    ),
    Device(
        id="scalp-reader-loreal",
        name="ScalpReader Pro",
        model="SR-PRO-2024",
        core_device="ScalpReader",
        brand_name="L'Oréal",
    ),
    Device(
        id="kscan-armani",
        name="KSCAN by Armani",
        model="KSCAN-ARM-2024",
        core_device="ScalpReader",
        brand_name="Armani",
    ),
    Device(
        id="hair-dryer-armani",
        name="Armani Hair Dryer Elite",
        model="HD-ARM-ELITE",
        core_device="Hair Dryer",
        brand_name="Armani",
    ),
]

# ==============================================================================
# HAIR DRYER PRO 2024
# ==============================================================================

# --- ENTRY: PROBLEM CATEGORY ---
initial_problem = DecisionNode(
    id="initial-problem",
    question="What type of issue is the customer experiencing?",
    description="Select the primary concern to begin troubleshooting",
    options=[
        DecisionOption(id="power-issue", text="Device won't turn on / No power", next_node_id="power-troubleshoot"),
        DecisionOption(id="heat-issue", text="Not heating properly / Temperature issues", next_node_id="heat-troubleshoot"),
        DecisionOption(id="airflow-issue", text="Weak airflow / Fan problems", next_node_id="airflow-troubleshoot"),
        DecisionOption(id="noise-issue", text="Unusual noise / Vibration", next_node_id="noise-troubleshoot"),
        DecisionOption(id="physical-damage", text="Physical damage / Cord issues", next_node_id="damage-assessment"),
    ],
)

# --- POWER ---
power_troubleshoot = DecisionNode(
    id="power-troubleshoot",
    question="Is the device plugged into a working outlet?",
    description="First, let's verify the power source",
    options=[
        DecisionOption(
            id="outlet-working",
            text="Yes, outlet is working (tested with another device)",
            next_node_id="check-power-button",
        ),
        DecisionOption(
            id="outlet-not-working",
            text="No, or outlet hasn't been tested",
            next_node_id="test-outlet",
        ),
    ],
)

test_outlet = DecisionNode(
    id="test-outlet",
    question="After testing the outlet with another device, does it work?",
    description="Have the customer test the outlet with a lamp or other device",
    options=[
        DecisionOption(
            id="outlet-confirmed-working",
            text="Yes, outlet works with other devices",
            next_node_id="check-power-button",
        ),
        DecisionOption(
            id="outlet-not-working-confirmed",
            text="No, outlet is not working",
            solution=(
                "The issue is with the electrical outlet, not the device. Advise customer "
                "to contact an electrician or try a different outlet."
            ),
        ),
    ],
)

check_power_button = DecisionNode(
    id="check-power-button",
    question="Does the power button click properly when pressed?",
    description="Check if the power button feels normal and responsive",
    options=[
        DecisionOption(
            id="button-clicks-normally",
            text="Yes, button clicks normally",
            next_node_id="check-cord-damage",
        ),
        DecisionOption(
            id="button-stuck-loose",
            text="No, button is stuck, loose, or unresponsive",
            solution=(
                "Power button mechanism is faulty. Device requires repair or replacement. "
                "Check warranty status and process RMA if applicable."
            ),
        ),
    ],
)

check_cord_damage = DecisionNode(
    id="check-cord-damage",
    question="Is there any visible damage to the power cord?",
    description="Look for cuts, kinks, exposed wires, or bent plugs",
    options=[
        DecisionOption(
            id="cord-undamaged",
            text="No visible damage to cord",
            solution=(
                "Internal electrical fault suspected. Device requires professional repair. "
                "Check warranty status and initiate RMA process."
            ),
        ),
        DecisionOption(
            id="cord-damaged",
            text="Yes, visible damage to power cord",
            solution=(
                "Power cord is damaged and unsafe to use. Device requires repair or replacement. "
                "Do not advise customer to continue using. Process immediate RMA."
            ),
        ),
    ],
)

# --- HEAT ---
heat_troubleshoot = DecisionNode(
    id="heat-troubleshoot",
    question="Does the device turn on but produce no heat, or does it produce some heat but not enough?",
    options=[
        DecisionOption(
            id="no-heat-at-all",
            text="Device turns on but produces no heat at all",
            next_node_id="heat-setting-check",
        ),
        DecisionOption(
            id="insufficient-heat",
            text="Device produces some heat but not as hot as expected",
            next_node_id="heat-setting-max",
        ),
    ],
)

heat_setting_check = DecisionNode(
    id="heat-setting-check",
    question="Is the heat setting turned to maximum?",
    description="Verify the temperature control is set to highest setting",
    options=[
        DecisionOption(
            id="heat-on-max",
            text="Yes, heat setting is on maximum",
            solution=(
                "Heating element failure. Device requires repair. The heating coil likely "
                "needs replacement. Check warranty and process RMA."
            ),
        ),
        DecisionOption(
            id="heat-not-max",
            text="No, heat was not on maximum setting",
            solution=(
                "Advise customer to set heat to maximum and test again. If still no heat after "
                "setting to max, heating element has failed and device needs repair."
            ),
        ),
    ],
)

heat_setting_max = DecisionNode(
    id="heat-setting-max",
    question="How long has the customer owned this device?",
    description="Check purchase date or warranty information",
    options=[
        DecisionOption(
            id="recent-purchase",
            text="Less than 6 months",
            solution=(
                "Defective heating element from manufacturing. Full replacement warranted. "
                "Process immediate RMA for new device."
            ),
        ),
        DecisionOption(
            id="older-device",
            text="6 months or more",
            solution=(
                "Normal wear on heating element. Performance degradation expected over time. "
                "Check warranty status - may qualify for discounted replacement."
            ),
        ),
    ],
)

# --- AIRFLOW ---
airflow_troubleshoot = DecisionNode(
    id="airflow-troubleshoot",
    question="When did the customer last clean the air intake filter?",
    description="Check maintenance history",
    options=[
        DecisionOption(
            id="recently-cleaned",
            text="Within the last month",
            next_node_id="check-obstruction",
        ),
        DecisionOption(
            id="not-recently-cleaned",
            text="More than a month ago or never",
            solution=(
                "Clogged air filter is likely cause. Guide customer through cleaning process: "
                "Remove back filter, rinse with warm water, let dry completely, reinstall. "
                "Test device after cleaning."
            ),
        ),
    ],
)

check_obstruction = DecisionNode(
    id="check-obstruction",
    question="Is there any visible hair or debris in the air intake or outlet?",
    options=[
        DecisionOption(
            id="no-obstruction",
            text="No visible obstruction",
            solution=(
                "Internal fan motor issue suspected. Device requires professional service. "
                "Fan motor may need replacement or repair."
            ),
        ),
        DecisionOption(
            id="obstruction-found",
            text="Yes, hair or debris visible",
            solution=(
                "Remove visible debris carefully with tweezers (device unplugged). Clean "
                "thoroughly and test. If airflow still weak after cleaning, internal motor "
                "service needed."
            ),
        ),
    ],
)

# --- NOISE ---
noise_troubleshoot = DecisionNode(
    id="noise-troubleshoot",
    question="What type of noise is the device making?",
    options=[
        DecisionOption(
            id="grinding-noise",
            text="Grinding or scraping sound",
            solution=(
                "Foreign object in fan mechanism or worn bearings. Stop using immediately - "
                "potential safety hazard. Device requires immediate professional service."
            ),
        ),
        DecisionOption(
            id="rattling-noise",
            text="Rattling or vibrating sound",
            solution=(
                "Loose internal component or unbalanced fan. Device should be serviced to "
                "prevent further damage. Safe to use temporarily at lower speeds."
            ),
        ),
        DecisionOption(
            id="high-pitched-whine",
            text="High-pitched whining sound",
            solution=(
                "Motor bearing wear or overheating. Reduce usage frequency and schedule "
                "service. Motor may need lubrication or replacement."
            ),
        ),
    ],
)

# --- PHYSICAL DAMAGE ---
damage_assessment = DecisionNode(
    id="damage-assessment",
    question="What type of physical damage is present?",
    options=[
        DecisionOption(
            id="cord-damage-visible",
            text="Power cord has cuts, kinks, or exposed wires",
            solution=(
                "Cord damage creates serious safety hazard. Device must not be used. Immediate "
                "replacement or repair required. Check if cord damage is covered under "
                "warranty terms."
            ),
        ),
        DecisionOption(
            id="housing-cracks",
            text="Cracks in plastic housing",
            solution=(
                "Structural damage may affect safety and performance. Assess if cracks expose "
                "internal components. Minor cosmetic cracks may not require immediate service."
            ),
        ),
        DecisionOption(
            id="buttons-damaged",
            text="Control buttons are broken or missing",
            solution=(
                "Control panel replacement needed. Device may be unsafe to operate without "
                "proper controls. Check availability of replacement control assembly."
            ),
        ),
    ],
)

hair_dryer_pro_tree = DecisionTree(
    device_id="hair-dryer-pro-2024",
    root_node_id="initial-problem",
    nodes={
        node.id: node
        for node in [
            initial_problem,
            power_troubleshoot,
            test_outlet,
            check_power_button,
            check_cord_damage,
            heat_troubleshoot,
            heat_setting_check,
            heat_setting_max,
            airflow_troubleshoot,
            check_obstruction,
            noise_troubleshoot,
            damage_assessment,
        ]
    },
)

# ==============================================================================
# STRAIGHTENER ELITE X1
# ==============================================================================

straightener_initial = DecisionNode(
    id="straightener-initial",
    question="What issue is the customer experiencing with their straightener?",
    options=[
        DecisionOption(
            id="not-heating",
            text="Device not heating up",
            next_node_id="straightener-power-check",
        ),
        DecisionOption(
            id="uneven-heating",
            text="Plates heating unevenly",
            solution=(
                "Uneven plate heating indicates internal sensor or heating element issues. "
                "Device requires professional calibration or repair."
            ),
        ),
        DecisionOption(
            id="plates-sticking",
            text="Plates are sticky or pulling hair",
            solution=(
                "Clean plates with appropriate cleaning solution. If problem persists after "
                "cleaning, plate coating may be damaged and require replacement."
            ),
        ),
    ],
)

straightener_power_check = DecisionNode(
    id="straightener-power-check",
    question="Does the power indicator light turn on?",
    options=[
        DecisionOption(
            id="light-on",
            text="Yes, power light is on",
            solution=(
                "Power is reaching device but heating elements have failed. Internal repair "
                "required for heating element replacement."
            ),
        ),
        DecisionOption(
            id="light-off",
            text="No, no power light",
            solution=(
                "Check power connection and outlet. If outlet works with other devices, the "
                "straightener has an internal electrical fault and needs repair."
            ),
        ),
    ],
)

straightener_elite_tree = DecisionTree(
    device_id="straightener-elite-x1",
    root_node_id="straightener-initial",
    nodes={
        "straightener-initial": straightener_initial,
        "straightener-power-check": straightener_power_check,
    },
)

# ==============================================================================
# REGISTRY
# ==============================================================================

HARDCODED_TREES = {
    hair_dryer_pro_tree.device_id: hair_dryer_pro_tree,
    straightener_elite_tree.device_id: straightener_elite_tree,
}
