"""wxPython window for the multi-card draw probability calculator."""

from __future__ import annotations

from dataclasses import dataclass

import wx
from loguru import logger

from services.draw_calc_service import (
    DrawCalcRequest,
    DrawCalcService,
    DrawCalcValidationError,
    TargetCard,
    get_draw_calc_service,
    hand_size_caption,
)
from utils.constants import (
    CALCULATE_BUTTON_COLOUR,
    DARK_BG,
    DARK_PANEL,
    DEFAULT_GAME_TEMPLATE,
    DRAW_CALC_FRAME_MIN_SIZE,
    DRAW_CALC_FRAME_SIZE,
    DRAW_CALC_SECTION_PADDING,
    DRAW_CALC_SPIN_MAX,
    DRAW_CALC_SPIN_WIDTH,
    GAME_TEMPLATES,
    LIGHT_TEXT,
    MAX_CARD_GROUPS,
    SUBDUED_TEXT,
    get_game_template,
)

FORMULA_TEXT = (
    "Single card: P(X=k) = [C(K,k) × C(N-K,n-k)] / C(N,n)\n"
    "Several cards: P(X1=k1, ...) = [ΠC(Ki,ki) × C(N-ΣKi,n-Σki)] / C(N,n)\n"
    "N: deck, K: copies in deck, n: hand, k: copies wanted"
)


@dataclass
class _TargetCardRow:
    panel: wx.Panel
    name_ctrl: wx.TextCtrl
    count_spin: wx.SpinCtrl
    desired_spin: wx.SpinCtrl


class DrawCalcFrame(wx.Frame):
    """Deck/hand form with up to MAX_CARD_GROUPS target cards."""

    def __init__(
        self,
        parent: wx.Window | None = None,
        service: DrawCalcService | None = None,
    ) -> None:
        super().__init__(parent, title="Draw Probability Calculator", size=DRAW_CALC_FRAME_SIZE)
        self.service = service or get_draw_calc_service()
        self._rows: list[_TargetCardRow] = []
        self._template_keys = list(GAME_TEMPLATES)

        self._build_ui()
        self._add_target_row(TargetCard())
        self._refresh_hand_size_label()

        self.SetMinSize(DRAW_CALC_FRAME_MIN_SIZE)
        self.Centre(wx.BOTH)

    # ------------------------------------------------------------------ UI ------------------------------------------------------------------
    def _build_ui(self) -> None:
        self.SetBackgroundColour(DARK_BG)

        self.panel = wx.Panel(self)
        self.panel.SetBackgroundColour(DARK_BG)
        sizer = wx.BoxSizer(wx.VERTICAL)
        self.panel.SetSizer(sizer)
        pad = DRAW_CALC_SECTION_PADDING

        default = get_game_template(DEFAULT_GAME_TEMPLATE)

        grid = wx.FlexGridSizer(4, 2, 4, 8)
        sizer.Add(grid, 0, wx.ALL | wx.EXPAND, pad)

        self.template_choice = wx.Choice(
            self.panel, choices=[GAME_TEMPLATES[key].name for key in self._template_keys]
        )
        self.template_choice.SetSelection(self._template_keys.index(DEFAULT_GAME_TEMPLATE))
        self.template_choice.SetToolTip(default.description)
        self.template_choice.Bind(wx.EVT_CHOICE, self._on_template_selected)
        grid.Add(self._label("Game Template:"), 0, wx.ALIGN_CENTER_VERTICAL)
        grid.Add(self.template_choice, 0)

        self.spin_deck_size = self._spin(self.panel, 1, default.deck_size)
        self.spin_deck_size.SetToolTip("Total cards in deck (N)")
        grid.Add(self._label("Deck Size:"), 0, wx.ALIGN_CENTER_VERTICAL)
        grid.Add(self.spin_deck_size, 0)

        self.spin_hand_size = self._spin(self.panel, 0, default.base_hand_size)
        self.spin_hand_size.SetToolTip("Opening hand before the first-turn draw")
        self.spin_hand_size.Bind(wx.EVT_SPINCTRL, lambda _evt: self._refresh_hand_size_label())
        self.spin_hand_size.Bind(wx.EVT_TEXT, lambda _evt: self._refresh_hand_size_label())
        grid.Add(self._label("Opening Hand:"), 0, wx.ALIGN_CENTER_VERTICAL)
        grid.Add(self.spin_hand_size, 0)

        self.seat_radio = wx.RadioBox(
            self.panel, choices=["On the play", "On the draw"], style=wx.RA_SPECIFY_COLS
        )
        self.seat_radio.SetForegroundColour(LIGHT_TEXT)
        self.seat_radio.Bind(wx.EVT_RADIOBOX, lambda _evt: self._refresh_hand_size_label())
        grid.Add(self._label("Seat:"), 0, wx.ALIGN_CENTER_VERTICAL)
        grid.Add(self.seat_radio, 0)

        self.hand_size_label = self._label("", subtle=True)
        sizer.Add(self.hand_size_label, 0, wx.LEFT | wx.RIGHT | wx.BOTTOM, pad)

        cards_title = self._label(f"Target Cards (up to {MAX_CARD_GROUPS})", bold=True)
        sizer.Add(cards_title, 0, wx.LEFT | wx.RIGHT | wx.TOP, pad)

        self.rows_sizer = wx.BoxSizer(wx.VERTICAL)
        sizer.Add(self.rows_sizer, 0, wx.ALL | wx.EXPAND, pad)

        self.add_btn = wx.Button(self.panel, label="Add Target Card")
        self._stylize_secondary_button(self.add_btn)
        self.add_btn.Bind(wx.EVT_BUTTON, lambda _evt: self._add_target_row(TargetCard(count_in_deck=1)))
        sizer.Add(self.add_btn, 0, wx.LEFT | wx.RIGHT | wx.EXPAND, pad)

        calc_btn = wx.Button(self.panel, label="Calculate")
        calc_btn.SetBackgroundColour(CALCULATE_BUTTON_COLOUR)
        calc_btn.SetForegroundColour(LIGHT_TEXT)
        font = calc_btn.GetFont()
        font.MakeBold()
        calc_btn.SetFont(font)
        calc_btn.Bind(wx.EVT_BUTTON, self._on_calculate)
        sizer.Add(calc_btn, 0, wx.ALL | wx.EXPAND, pad)

        self.result_label = self._label("")
        sizer.Add(self.result_label, 0, wx.LEFT | wx.RIGHT | wx.BOTTOM | wx.EXPAND, pad)

        divider = wx.StaticLine(self.panel)
        sizer.Add(divider, 0, wx.LEFT | wx.RIGHT | wx.BOTTOM | wx.EXPAND, pad)

        formula = self._label(FORMULA_TEXT, subtle=True)
        sizer.Add(formula, 0, wx.ALL, pad)

    def _label(self, text: str, *, bold: bool = False, subtle: bool = False) -> wx.StaticText:
        label = wx.StaticText(self.panel, label=text)
        label.SetForegroundColour(SUBDUED_TEXT if subtle else LIGHT_TEXT)
        label.SetBackgroundColour(DARK_BG)
        if bold:
            font = label.GetFont()
            font.MakeBold()
            label.SetFont(font)
        return label

    def _spin(self, parent: wx.Window, minimum: int, initial: int) -> wx.SpinCtrl:
        spin = wx.SpinCtrl(
            parent,
            min=minimum,
            max=DRAW_CALC_SPIN_MAX,
            initial=initial,
            size=(DRAW_CALC_SPIN_WIDTH, -1),
            style=wx.SP_ARROW_KEYS | wx.TE_PROCESS_ENTER,
        )
        spin.Bind(wx.EVT_TEXT_ENTER, self._on_calculate)
        return spin

    def _stylize_secondary_button(self, button: wx.Button) -> None:
        button.SetBackgroundColour(DARK_PANEL)
        button.SetForegroundColour(LIGHT_TEXT)
        font = button.GetFont()
        font.MakeBold()
        button.SetFont(font)

    def _add_target_row(self, card: TargetCard) -> None:
        if len(self._rows) >= MAX_CARD_GROUPS:
            return

        row_panel = wx.Panel(self.panel)
        row_panel.SetBackgroundColour(DARK_PANEL)
        row_sizer = wx.BoxSizer(wx.HORIZONTAL)
        row_panel.SetSizer(row_sizer)

        name_ctrl = wx.TextCtrl(row_panel, value=card.name, size=(120, -1))
        name_ctrl.SetHint("Card name")
        row_sizer.Add(name_ctrl, 1, wx.ALL | wx.ALIGN_CENTER_VERTICAL, 4)

        count_spin = self._spin(row_panel, 0, card.count_in_deck)
        count_spin.SetToolTip("Copies in deck (K)")
        row_sizer.Add(count_spin, 0, wx.ALL | wx.ALIGN_CENTER_VERTICAL, 4)

        desired_spin = self._spin(row_panel, 0, card.desired_count)
        desired_spin.SetToolTip("Copies wanted (k)")
        row_sizer.Add(desired_spin, 0, wx.ALL | wx.ALIGN_CENTER_VERTICAL, 4)

        row = _TargetCardRow(row_panel, name_ctrl, count_spin, desired_spin)

        remove_btn = wx.Button(row_panel, label="Remove", size=(64, -1))
        remove_btn.SetBackgroundColour(DARK_BG)
        remove_btn.SetForegroundColour(LIGHT_TEXT)
        remove_btn.Bind(wx.EVT_BUTTON, lambda _evt, r=row: self._remove_target_row(r))
        row_sizer.Add(remove_btn, 0, wx.ALL | wx.ALIGN_CENTER_VERTICAL, 4)

        self.rows_sizer.Add(row_panel, 0, wx.BOTTOM | wx.EXPAND, 4)
        self._rows.append(row)
        self._refresh_rows()

    def _remove_target_row(self, row: _TargetCardRow) -> None:
        self._rows.remove(row)
        self.rows_sizer.Detach(row.panel)
        row.panel.Destroy()
        self._refresh_rows()

    def _refresh_rows(self) -> None:
        at_max = len(self._rows) >= MAX_CARD_GROUPS
        self.add_btn.Enable(not at_max)
        self.add_btn.SetLabel("Maximum reached" if at_max else "Add Target Card")
        self.panel.Layout()

    # ------------------------------------------------------------------ Event handlers -------------------------------------------------------
    def _selected_template_key(self) -> str:
        selection = self.template_choice.GetSelection()
        if selection == wx.NOT_FOUND:
            return DEFAULT_GAME_TEMPLATE
        return self._template_keys[selection]

    def _on_template_selected(self, _event: wx.CommandEvent) -> None:
        request = self.service.apply_template(self._read_request(), self._selected_template_key())
        self.spin_deck_size.SetValue(request.deck_size)
        self.spin_hand_size.SetValue(request.base_hand_size)
        self.template_choice.SetToolTip(get_game_template(request.game_template).description)
        self._refresh_hand_size_label()

    def _refresh_hand_size_label(self) -> None:
        caption = hand_size_caption(
            self.spin_hand_size.GetValue(),
            self._selected_template_key(),
            self.seat_radio.GetSelection() == 0,
        )
        self.hand_size_label.SetLabel(caption)

    def _read_request(self) -> DrawCalcRequest:
        return DrawCalcRequest(
            deck_size=self.spin_deck_size.GetValue(),
            base_hand_size=self.spin_hand_size.GetValue(),
            game_template=self._selected_template_key(),
            is_first_player=self.seat_radio.GetSelection() == 0,
            target_cards=tuple(
                TargetCard(
                    name=row.name_ctrl.GetValue(),
                    count_in_deck=row.count_spin.GetValue(),
                    desired_count=row.desired_spin.GetValue(),
                )
                for row in self._rows
            ),
        )

    def _on_calculate(self, _event: wx.CommandEvent | None) -> None:
        """Calculate and display both probabilities."""
        self._refresh_hand_size_label()
        try:
            outcome = self.service.calculate(self._read_request())
        except DrawCalcValidationError as exc:
            self.result_label.SetLabel("\n".join(f"Error: {message}" for message in exc.errors))
        except Exception as exc:
            logger.error(f"Calculator error: {exc}")
            self.result_label.SetLabel("Calculation error")
        else:
            self.result_label.SetLabel("\n".join(outcome.summary_lines()))
        self.panel.Layout()


def open_draw_calc(parent: wx.Window | None = None) -> DrawCalcFrame:
    frame = DrawCalcFrame(parent)
    frame.Show()
    return frame


__all__ = ["DrawCalcFrame", "open_draw_calc"]
