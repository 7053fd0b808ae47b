"""Encoded init-script bundle.

Generated from ``tcl/sta.tcl`` with ``sta_shell.bundle.encode_script``.
Do not edit by hand; regenerate after changing the Tcl source.
"""
from __future__ import annotations

from typing import Final

TCL_INITS: Final[tuple[str, ...]] = (
    "035032115116097045115104101108108032101109098101100100101100032105110105",
    "116032115099114105112116046010035010035032069110099111100101100032105110",
    "116111032115116097095115104101108108047098117110100108101047105110105116",
    "095115099114105112116115046112121032097116032098117105108100032116105109",
    "101032097110100010035032101118097108117097116101100032111110099101032097",
    "116032115116097114116117112044032097102116101114032116104101032100111109",
    "097105110032099111109109097110100115032097114101032114101103105115116101",
    "114101100046010010110097109101115112097099101032101118097108032115116097",
    "032123010010118097114105097098108101032099109100095097114103115010097114",
    "114097121032115101116032099109100095097114103115032123125010010035032067",
    "111109109097110100115032105110032116104101032115116097032110097109101115",
    "112097099101032116104097116032100101102105110101095115116097095099109100",
    "115032100111101115032110111116032101120112111114116046010118097114105097",
    "098108101032104105100100101110095099109100115032123100101102105110101095",
    "099109100095097114103115032100101102105110101095115116097095099109100115",
    "032115104111119095115112108097115104032116099108095115111117114099101125",
    "010010112114111099032100101102105110101095099109100095097114103115032123",
    "032099109100032097114103108105115116032125032123010032032118097114105097",
    "098108101032099109100095097114103115010032032115101116032099109100095097",
    "114103115040036099109100041032036097114103108105115116010125010010112114",
    "111099032115104111119095115112108097115104032123125032123010032032115101",
    "116032118101114115105111110032034034010032032105102032123032091105110102",
    "111032099111109109097110100115032058058115116097058058118101114115105111",
    "110093032110101032034034032125032123010032032032032115101116032118101114",
    "115105111110032034032091058058115116097058058118101114115105111110093034",
    "010032032125010032032112117116115032034115116097045115104101108108036118",
    "101114115105111110034010032032112117116115032034083116097116105099032116",
    "105109105110103032097110097108121115105115032099111109109097110100032115",
    "104101108108046034010032032112117116115032034084121112101032092034104101",
    "108112092034032102111114032097032108105115116032111102032099111109109097",
    "110100115044032092034101120105116092034032116111032113117105116046034010",
    "125010010035032069120112111114116032101118101114121032099111109109097110",
    "100032108105118105110103032105110032116104101032115116097032110097109101",
    "115112097099101032115111032116104097116010035032034110097109101115112097",
    "099101032105109112111114116032115116097058058042034032112117098108105115",
    "104101115032105116032103108111098097108108121046010112114111099032100101",
    "102105110101095115116097095099109100115032123125032123010032032118097114",
    "105097098108101032104105100100101110095099109100115010032032102111114101",
    "097099104032099109100032091105110102111032099111109109097110100115032058",
    "058115116097058058042093032123010032032032032115101116032110097109101032",
    "091110097109101115112097099101032116097105108032036099109100093010032032",
    "032032105102032123032091108115101097114099104032045101120097099116032036",
    "104105100100101110095099109100115032036110097109101093032061061032045049",
    "032125032123010032032032032032032110097109101115112097099101032101120112",
    "111114116032036110097109101010032032032032125010032032125010125010010112",
    "114111099032104101108112032123032123112097116116101114110032034042034125",
    "032125032123010032032118097114105097098108101032099109100095097114103115",
    "010032032118097114105097098108101032104105100100101110095099109100115010",
    "032032115101116032110097109101115032123125010032032102111114101097099104",
    "032099109100032091105110102111032099111109109097110100115032058058115116",
    "097058058036112097116116101114110093032123010032032032032115101116032110",
    "097109101032091110097109101115112097099101032116097105108032036099109100",
    "093010032032032032105102032123032091108115101097114099104032045101120097",
    "099116032036104105100100101110095099109100115032036110097109101093032061",
    "061032045049032125032123010032032032032032032108097112112101110100032110",
    "097109101115032036110097109101010032032032032125010032032125010032032102",
    "111114101097099104032110097109101032091108115111114116032036110097109101",
    "115093032123010032032032032105102032123032091105110102111032101120105115",
    "116115032099109100095097114103115040036110097109101041093032125032123010",
    "032032032032032032112117116115032034036110097109101032036099109100095097",
    "114103115040036110097109101041034010032032032032125032101108115101032123",
    "010032032032032032032112117116115032036110097109101010032032032032125010",
    "032032125010125010010100101102105110101095099109100095097114103115032034",
    "104101108112034032123091112097116116101114110093125010010125010010035032",
    "115111117114099101032091045101099104111093032091045118101114098111115101",
    "093032102105108101110097109101010035032032045101099104111032032032032032",
    "112114105110116032101097099104032099111109109097110100032098101102111114",
    "101032101118097108117097116105110103032105116010035032032045118101114098",
    "111115101032032112114105110116032101097099104032110111110045101109112116",
    "121032099111109109097110100032114101115117108116010105102032123032091105",
    "110102111032099111109109097110100115032058058115116097058058116099108095",
    "115111117114099101093032101113032034034032125032123010032032114101110097",
    "109101032058058115111117114099101032058058115116097058058116099108095115",
    "111117114099101010125010010112114111099032115111117114099101032123032097",
    "114103115032125032123010032032115101116032101099104111032048010032032115",
    "101116032118101114098111115101032048010032032119104105108101032123032091",
    "108108101110103116104032036097114103115093032062032049032125032123010032",
    "032032032115101116032097114103032091108105110100101120032036097114103115",
    "032048093010032032032032105102032123032036097114103032101113032034045101",
    "099104111034032125032123010032032032032032032115101116032101099104111032",
    "049010032032032032125032101108115101105102032123032036097114103032101113",
    "032034045118101114098111115101034032125032123010032032032032032032115101",
    "116032118101114098111115101032049010032032032032125032101108115101032123",
    "010032032032032032032098114101097107010032032032032125010032032032032115",
    "101116032097114103115032091108114097110103101032036097114103115032049032",
    "101110100093010032032125010032032105102032123032033036101099104111032038",
    "038032033036118101114098111115101032125032123010032032032032114101116117",
    "114110032091117112108101118101108032049032091108105110115101114116032036",
    "097114103115032048032058058115116097058058116099108095115111117114099101",
    "093093010032032125010032032115101116032102105108101110097109101032091108",
    "105110100101120032036097114103115032048093010032032115101116032115116114",
    "101097109032091111112101110032036102105108101110097109101032114093010032",
    "032115101116032112114101118105111117115095115099114105112116032091105110",
    "102111032115099114105112116093010032032105110102111032115099114105112116",
    "032036102105108101110097109101010032032115101116032099109100032034034010",
    "032032115101116032099111100101032048010032032115101116032114101115117108",
    "116032034034010032032119104105108101032123032033091101111102032036115116",
    "114101097109093032125032123010032032032032097112112101110100032099109100",
    "032091103101116115032036115116114101097109093032034092110034010032032032",
    "032105102032123032033091105110102111032099111109112108101116101032036099",
    "109100093032125032123010032032032032032032099111110116105110117101010032",
    "032032032125010032032032032115101116032116114105109109101100032091115116",
    "114105110103032116114105109032036099109100093010032032032032115101116032",
    "099109100032034034010032032032032105102032123032036116114105109109101100",
    "032101113032034034032125032123010032032032032032032099111110116105110117",
    "101010032032032032125010032032032032105102032123032036101099104111032125",
    "032123010032032032032032032112117116115032036116114105109109101100010032",
    "032032032125010032032032032115101116032099111100101032091099097116099104",
    "032123032117112108101118101108032035048032036116114105109109101100032125",
    "032114101115117108116093010032032032032105102032123032036099111100101032",
    "033061032048032125032123010032032032032032032098114101097107010032032032",
    "032125010032032032032105102032123032036118101114098111115101032038038032",
    "036114101115117108116032110101032034034032125032123010032032032032032032",
    "112117116115032036114101115117108116010032032032032125010032032125010032",
    "032099108111115101032036115116114101097109010032032105110102111032115099",
    "114105112116032036112114101118105111117115095115099114105112116010032032",
    "105102032123032036099111100101032061061032049032125032123010032032032032",
    "114101116117114110032045099111100101032101114114111114032036114101115117",
    "108116010032032125010032032114101116117114110032036114101115117108116010",
    "125010",
    "",
)
